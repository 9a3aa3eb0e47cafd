"""Errors raised by the interface."""


class IMError(Exception):
    """An error carrying a service or local error code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"IMError(code={self.code!r}, message={self.message!r})"