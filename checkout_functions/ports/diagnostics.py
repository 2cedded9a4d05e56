from typing import Protocol


class DiagnosticsPort(Protocol):
    """Informational stream for a function invocation. Never affects results."""

    def emit(self, message: str) -> None:
        ...
