"""
Console operational log adapter - Implements OperationalLog protocol.

This module provides a logging-based implementation of the domain's
operational log port. Events land in the standard logging tree, so
whatever handlers the process configures decide where they go.
"""

import logging

logger = logging.getLogger(__name__)

# Events that mean something broke rather than a caller mistake
_ERROR_EVENTS = frozenset({"unexpected_failure", "malformed_secret"})


class ConsoleOperationalLog:
    """
    Implements OperationalLog protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def record(self, event: str, detail: str) -> None:
        """
        Log an operational event.

        Error events are logged at ERROR level, everything else at WARNING.

        Args:
            event: Short event name
            detail: Event detail (never contains secrets)
        """
        level = logging.ERROR if event in _ERROR_EVENTS else logging.WARNING
        logger.log(level, "[%s] %s", event.upper(), detail)
