"""Custom exceptions for the state module."""


class MalformedStateError(Exception):
    """Raised when a stored state entry exists but cannot be parsed."""

    def __init__(self, gist_id: str, file_name: str, reason: str) -> None:
        super().__init__(f"State file '{file_name}' in gist '{gist_id}' could not be parsed: {reason}")
        self.gist_id = gist_id
        self.file_name = file_name
        self.reason = reason
