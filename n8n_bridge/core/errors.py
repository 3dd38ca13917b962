"""Base exception class for all n8n-bridge-specific errors."""


class BridgeError(Exception):
    """Base class for all n8n-bridge errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
