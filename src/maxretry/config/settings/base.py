"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from maxretry.kernel.errors import redact_url


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses read from ``<PREFIX>_<FIELD>`` variables.

    ``__post_init__`` runs :meth:`_validate`, so an instance that exists is
    consistent. Fields named in ``_secret_fields`` are masked by
    :meth:`redacted`.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def redacted(self) -> dict[str, Any]:
        """Field values safe to log; URLs keep everything but the password."""
        values = dataclasses.asdict(self)
        for name in self._secret_fields:
            value = values.get(name)
            if isinstance(value, str) and "://" in value:
                values[name] = redact_url(value)
            elif value:
                values[name] = "***"
        return values


__all__ = ["Settings"]
