"""
Audit Logger utility.

Responsibility boundaries:
- Records generator lifecycle events (creation, reseed) for replay.
- Never invoked from the per-sample path.
"""

import logging
from typing import Any, Dict, Optional


AUDIT_LOGGER_NAME = "randf.audit"


class AuditLogger:
    """
    A centralized logger for audit and replay purposes.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, enabled: bool = True) -> None:
        self._logger = logger or logging.getLogger(AUDIT_LOGGER_NAME)
        self.enabled = enabled

    def log_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Log a specific event.

        Args:
            event_type: The category of the event.
            data: The event payload. Keys are written in sorted order.
        """
        if not self.enabled:
            return
        payload = " ".join(f"{key}={data[key]!r}" for key in sorted(data))
        self._logger.debug("%s %s", event_type, payload)
