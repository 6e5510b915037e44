from __future__ import annotations

import dataclasses
import math
import re
from enum import Enum
from typing import Any, Callable, Mapping, Type, TypeVar

from ..core.constants import EMAIL_PATTERN
from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


def _fail(field_name: str, message: str) -> ValidationError:
    return ValidationError(message, {field_name: message})


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise _fail(field_name, f"{_label(field_name)} is required")
    return str(value).strip()


def optional_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.fullmatch(email):
        raise _fail(field_name, "Please enter a valid email address")
    return email


def optional_email(value: Any, field_name: str) -> str:
    email = optional_text(value)
    if email and not _EMAIL_RE.fullmatch(email):
        raise _fail(field_name, "Please enter a valid email address")
    return email


def require_iso_date(value: Any, field_name: str) -> str:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text).isoformat()
    except ValueError:
        raise _fail(field_name, f"{_label(field_name)} must be a date (YYYY-MM-DD)")


def require_choice(value: Any, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    text = require_non_empty(value, field_name)
    try:
        return enum_cls(text)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise _fail(field_name, f"{_label(field_name)} must be one of: {allowed}")


def parse_number(value: Any, field_name: str) -> float:
    """Parse-or-fail conversion for numeric form input.

    Booleans, blanks, NaN and infinities are rejected rather than coerced.
    """
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        raise _fail(field_name, f"{_label(field_name)} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise _fail(field_name, f"{_label(field_name)} must be a valid number")
    if math.isnan(number) or math.isinf(number):
        raise _fail(field_name, f"{_label(field_name)} must be a valid number")
    return number


def parse_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise _fail(field_name, f"{_label(field_name)} must be a positive integer")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise _fail(field_name, f"{_label(field_name)} must be a positive integer")
    if number <= 0:
        raise _fail(field_name, f"{_label(field_name)} must be a positive integer")
    return number


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def parse_id_list(value: Any, field_name: str) -> tuple[int, ...]:
    """Distinct positive ids, first occurrence order kept."""
    if value is None:
        return ()
    if isinstance(value, (str, int)):
        value = [value]
    ids: list[int] = []
    for item in value:
        sid = parse_positive_int(item, field_name)
        if sid not in ids:
            ids.append(sid)
    return tuple(ids)


def merged_fields(current: Any, changes: Mapping[str, Any], entity: str) -> dict:
    """Shallow merge of ``changes`` over a stored dataclass record (``id`` excluded)."""
    data = {f.name: getattr(current, f.name) for f in dataclasses.fields(current)}
    data.pop("id", None)
    if "id" in changes:
        raise _fail("id", f"{entity} id cannot be changed")
    unknown = sorted(set(changes) - set(data))
    if unknown:
        raise ValidationError(
            f"Unknown {entity.lower()} field(s): {', '.join(unknown)}",
            {name: "Unknown field" for name in unknown},
        )
    data.update(changes)
    return data


class FormValidator:
    """Collects per-field errors so a whole form is reported at once."""

    def __init__(self, entity: str):
        self._entity = entity
        self._errors: dict[str, str] = {}

    def check(self, fn: Callable[..., Any], *args: Any) -> Any | None:
        try:
            return fn(*args)
        except ValidationError as e:
            for name, message in e.errors.items():
                self._errors.setdefault(name, message)
            return None

    def add(self, field_name: str, message: str) -> None:
        self._errors.setdefault(field_name, message)

    def has_error(self, field_name: str) -> bool:
        return field_name in self._errors

    def raise_if_errors(self) -> None:
        if self._errors:
            raise ValidationError(f"Invalid {self._entity.lower()} data", self._errors)


def exists(repository: Any, record_id: int) -> bool:
    """True when ``repository.get_by_id`` finds the record."""
    try:
        repository.get_by_id(record_id)
    except NotFoundError:
        return False
    return True
