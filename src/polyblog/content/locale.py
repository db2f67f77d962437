"""Pick the per-locale field of a content record."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from polyblog.core.models import DEFAULT_LOCALE, ContentRecord, Locale

RecordLike = Union[ContentRecord, Mapping[str, Any]]


def coerce_locale(value: Union[str, Locale, None], default: Locale = DEFAULT_LOCALE) -> Locale:
    """Parse a request locale such as ``"ru"`` or ``"RU-ru"``; unknown values give ``default``."""
    if isinstance(value, Locale):
        return value
    if not value:
        return default
    code = str(value).strip().lower().replace("_", "-").split("-", 1)[0]
    try:
        return Locale(code)
    except ValueError:
        return default


def _field_value(record: RecordLike, name: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return value if isinstance(value, str) else ""


def resolved_locale(
    record: RecordLike,
    locale: Union[str, Locale, None],
    field: str = "content",
    default: Locale = DEFAULT_LOCALE,
) -> Optional[Locale]:
    """The locale whose field :func:`select_localized` would return, or None if all are empty."""
    requested = coerce_locale(locale, default)
    for candidate in (requested, default):
        if _field_value(record, f"{field}_{candidate.value}").strip():
            return candidate
    return None


def select_localized(
    record: RecordLike,
    locale: Union[str, Locale, None],
    field: str = "content",
    default: Locale = DEFAULT_LOCALE,
) -> str:
    """Return ``{field}_{locale}``, falling back to the default locale, then ``""``."""
    chosen = resolved_locale(record, locale, field, default)
    if chosen is None:
        return ""
    return _field_value(record, f"{field}_{chosen.value}")
