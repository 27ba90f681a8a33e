"""Concrete adapters for the pipeline capabilities."""
