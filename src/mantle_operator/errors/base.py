"""
Root of the mantle-operator exception hierarchy.

Each subclass declares its machine-readable ``code`` as a class attribute,
so callers can match on ``error.code`` without importing the class.
Errors that concern a specific transaction carry its hash.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

HASH_PREVIEW_LENGTH = 10


class MantleError(Exception):
    """
    Base class of every error the chain layer raises.

    Attributes:
        message: What went wrong, for humans.
        code: Stable identifier such as ``"NOT_FOUND"``; defaults to the
            class-level ``code``.
        tx_hash: Hash of the transaction involved, when there is one.
        details: Extra context, safe to log (never contains key material).

    Example:
        >>> try:
        ...     raise MantleError("Broadcast rejected", code="SUBMISSION_FAILED")
        ... except MantleError as e:
        ...     e.code
        'SUBMISSION_FAILED'
    """

    code: str = "MANTLE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.tx_hash = tx_hash
        self.details: Dict[str, Any] = dict(details) if details else {}

    @property
    def short_hash(self) -> Optional[str]:
        """Leading characters of ``tx_hash`` for log lines and messages."""
        if not self.tx_hash:
            return None
        return f"{self.tx_hash[:HASH_PREVIEW_LENGTH]}..."

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.short_hash:
            text += f" (tx: {self.short_hash})"
        return text

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in ("message", "code", "tx_hash", "details")
        )
        return f"{type(self).__name__}({fields})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form, keyed by the exception class name under ``error``."""
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "tx_hash": self.tx_hash,
            "details": self.details,
        }
