"""Payload-to-notification pipeline."""
