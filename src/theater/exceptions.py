"""Custom exceptions for statement generation errors."""

from typing import Any, Dict, Optional


class StatementError(Exception):
    """Error raised when an invoice cannot be turned into a statement."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class UnknownPlayTypeError(StatementError):
    """Raised when a play's type has no pricing rule."""

    def __init__(self, play_type: str) -> None:
        super().__init__(
            code="unknown_play_type",
            message=f"unknown type: {play_type}",
            details={"play_type": play_type},
        )
        self.play_type = play_type


class UnknownPlayError(StatementError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code="unknown_play",
            message=f"unknown play: {play_id}",
            details={"play_id": play_id},
        )
        self.play_id = play_id
