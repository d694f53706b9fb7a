"""Root error class for the maxretry error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every error raised by maxretry.

    ``str(err)`` renders ``"<code>: <message>"``, the form written into the
    ``x-failure-reason`` header of an error-queue copy. :meth:`to_dict` is
    the structured form bound to log events.

    Args:
        message: Human-readable description.
        code: Machine-readable slug, defaults to the class' ``default_code``.
        detail: Extra context; values must be loggable.
        cause: Exception that triggered this one, chained as ``__cause__``.
    """

    default_code: ClassVar[str] = "maxretry_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or type(self).default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = dict(self.detail)
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
