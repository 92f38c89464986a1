"""Primitive field types shared by the report models.

Each type accepts only the JSON value it names. Numeric strings are not
numbers, ``0``/``1`` are not booleans, and epoch integers are not timestamps.
Use these (or pydantic's ``StrictStr`` / ``StrictBool`` / ``StrictInt``) for
every primitive field.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Annotated, Any, Union
from uuid import UUID

from pydantic import AfterValidator, BeforeValidator, StrictStr, StringConstraints

_UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")
_ISO_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})$"
)


def _json_number(value: Any) -> Any:
    # bool is an int subclass; a JSON true is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("Input should be a finite number")
    return value


def _whole_number(value: Any) -> Any:
    value = _json_number(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Input should be a whole number")
        return int(value)
    return value


def _canonical_uuid(value: Any) -> Any:
    if not isinstance(value, str) or not _UUID_RE.match(value):
        raise ValueError("Input should be a hyphenated UUID string")
    return value


def _iso_datetime(value: Any) -> Any:
    if not isinstance(value, str) or not _ISO_DATETIME_RE.match(value):
        raise ValueError("Input should be an ISO 8601 datetime string with a UTC offset")
    return value


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("String should contain a non-whitespace character")
    return value


# Any finite JSON number, kept as int or float as given
JsonNumber = Annotated[Union[int, float], BeforeValidator(_json_number)]

# Finite JSON number stored as float
Number = Annotated[float, BeforeValidator(_json_number)]

# JSON number with no fractional part; 75.0 is stored as 75
WholeNumber = Annotated[int, BeforeValidator(_whole_number)]

CanonicalUUID = Annotated[UUID, BeforeValidator(_canonical_uuid)]

IsoDateTime = Annotated[datetime, BeforeValidator(_iso_datetime)]

NonBlankStr = Annotated[StrictStr, AfterValidator(_not_blank)]

# Hex-encoded SHA-256 digest
Sha256Hex = Annotated[StrictStr, StringConstraints(min_length=64, max_length=64, pattern=r"^[0-9a-fA-F]{64}$")]
