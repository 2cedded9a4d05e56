from typing import Protocol


class EnvironmentPort(Protocol):
    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...
