"""Errors raised while talking to the CRD search API."""

from __future__ import annotations

from typing import Any, Dict, Optional

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class CrdServiceError(Exception):
    """Base class for CRD search failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(CrdServiceError):
    """Raised when the HTTP round trip to the endpoint fails."""


class DecodeError(CrdServiceError):
    """Raised when the response body is not the expected XML document."""


class UpstreamApplicationError(CrdServiceError):
    """Raised when the endpoint rejects the request (``results_cd`` != 0)."""

    def __init__(self, code: str, field: str, message: str):
        super().__init__(
            message, details={"err_code": code, "err_fld": field, "err_msg": message}
        )
        self.code = code
        self.field = field

    def to_dict(self) -> Dict[str, str]:
        """Return the upstream error entry under its wire names."""
        return {"err_code": self.code, "err_fld": self.field, "err_msg": self.message}

    def __str__(self) -> str:
        return f"[{self.code}] {self.field}: {self.message}"


class InvariantViolation(CrdServiceError):
    """Raised when the response breaks its own success/error contract."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(UNKNOWN_ERROR_MESSAGE, details={"reason": reason, **(details or {})})
        self.reason = reason


__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "CrdServiceError",
    "TransportError",
    "DecodeError",
    "UpstreamApplicationError",
    "InvariantViolation",
]
