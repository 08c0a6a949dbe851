# ward_core/common/errors.py
"""
Domain error hierarchy.

Every failure raised by the ward core carries:
- code:        stable machine code (validation_error / not_authenticated / ...)
- message:     human readable description, safe to show to clinical staff
- detail:      optional extra context (dict / list / None)
- http_status: status used when the error crosses the HTTP boundary

Services and core functions only raise; the DRF exception handler renders
the envelope.
"""
from __future__ import annotations

from typing import Any


class WardError(Exception):
    """Base class for all ward core errors."""

    code = "error"
    http_status = 500

    def __init__(self, message: str, code: str | None = None, detail: Any = None):
        self.message = message
        if code is not None:
            self.code = code
        self.detail = detail
        super().__init__(message)


class ValidationError(WardError):
    """Input rejected before any write was attempted."""

    code = "validation_error"
    http_status = 400


class NotAuthenticatedError(WardError):
    """An action that needs a resolved actor was attempted without one."""

    code = "not_authenticated"
    http_status = 401


class PersistenceError(WardError):
    """
    I/O failure reported by the persistence layer.
    Never retried here; callers decide whether to resubmit.
    """

    code = "persistence_error"
    http_status = 503
