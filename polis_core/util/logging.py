"""Logging helpers."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List


class MessageCollector(logging.Handler):
    """Handler collecting timestamped messages by severity, e.g. for reports.

    Attach it to a logger (`logging.getLogger("polis_core").addHandler(...)`),
    inspect the lists and `flush` them when done.
    """

    def __init__(self, level=logging.INFO):
        super().__init__(level)
        self.info_messages: List[str] = []
        self.warning_messages: List[str] = []
        self.error_messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        stamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="seconds")
        message = f"{stamp} {self.format(record)}"
        if record.levelno >= logging.ERROR:
            self.error_messages.append(message)
        elif record.levelno >= logging.WARNING:
            self.warning_messages.append(message)
        else:
            self.info_messages.append(message)

    @property
    def messages(self) -> List[str]:
        return [*self.info_messages, *self.warning_messages, *self.error_messages]

    def flush(self) -> None:
        """Drop all collected messages."""
        self.acquire()
        try:
            self.info_messages.clear()
            self.warning_messages.clear()
            self.error_messages.clear()
        finally:
            self.release()
