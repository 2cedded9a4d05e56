"""
Diagnostics adapters.

Implement DiagnosticsPort for local runs and tests. The host owns the real
diagnostics stream; these write to the log or keep messages in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class LoggingDiagnostics:
    """Diagnostics written to the module logger."""

    function_name: str = "checkout-function"
    log_level: int = logging.INFO

    def emit(self, message: str) -> None:
        logger.log(self.log_level, "[%s] %s", self.function_name, message)


@dataclass
class RecordingDiagnostics:
    """Diagnostics kept in memory for assertions."""

    messages: list[str] = field(default_factory=list)

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()
