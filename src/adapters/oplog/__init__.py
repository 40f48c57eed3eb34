"""Operational log adapters - Event recording implementations."""

from .console import ConsoleOperationalLog

__all__ = ["ConsoleOperationalLog"]
