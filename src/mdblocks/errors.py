"""Error hierarchy for the mdblocks package.

Conversion itself never raises: any input string degrades to some block
sequence.  Errors exist only at the edges, where hand-built
:class:`~mdblocks.models.Block` values are checked against the invariants
the remote API enforces.

Every error carries a machine-readable ``code`` (from :class:`ErrorCode`),
a human-readable ``message``, an optional structured ``context`` dict, and
an optional ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    TEXT_OVERFLOW = "TEXT_OVERFLOW"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MdBlocksError(Exception):
    """Base exception for all mdblocks errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Block errors
# ---------------------------------------------------------------------------

class MdBlocksValidationError(MdBlocksError):
    """A block was constructed with a payload its kind does not allow.

    Context keys: ``kind``, ``field``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class MdBlocksTextOverflowError(MdBlocksValidationError):
    """A rich-text segment exceeds the 2000-character content limit.

    Context keys: ``kind``, ``content_length``, ``limit``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        MdBlocksError.__init__(
            self,
            code=ErrorCode.TEXT_OVERFLOW,
            message=message,
            context=context,
            cause=cause,
        )
