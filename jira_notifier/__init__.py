"""Jira to Rocket.Chat direct-message notifier."""

__version__ = "0.1.0"
