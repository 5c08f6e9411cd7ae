"""Request payload parsing shared by the services.

Each helper either returns a cleaned value or raises ``ValidationError``
naming the offending field, so routes can surface field-level detail.
"""

import re
from datetime import date, datetime
from urllib.parse import urlparse

from flask import request

from app.exceptions import MissingFieldsError, ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_fields(data, required_fields):
    missing = [
        field
        for field in required_fields
        if data.get(field) is None or (isinstance(data.get(field), str) and not data[field].strip())
    ]
    if missing:
        raise MissingFieldsError(missing)


def parse_string(data, field, min_length=0, max_length=None, default=None):
    value = data.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(fields={field: "Must be a string"})
    value = value.strip()
    if len(value) < min_length:
        raise ValidationError(fields={field: f"Must be at least {min_length} characters"})
    if max_length and len(value) > max_length:
        raise ValidationError(fields={field: f"Must be at most {max_length} characters"})
    return value


def parse_date(data, field, default=None) -> date:
    value = data.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(fields={field: "Must be an ISO date string"})
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError(fields={field: "Must be an ISO date string"})


def parse_choice(data, field, enum_cls, default=None):
    value = data.get(field)
    if value is None:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(fields={field: f"Must be one of: {choices}"})


def parse_bool(data, field, default=None):
    value = data.get(field)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(fields={field: "Must be true or false"})
    return value


def parse_url(data, field, default=None):
    value = parse_string(data, field)
    if not value:
        return default
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(fields={field: "Must be an http(s) URL"})
    return value


def parse_email(data, field):
    value = parse_string(data, field)
    if value is None:
        return None
    if not EMAIL_PATTERN.match(value):
        raise ValidationError(fields={field: "Must be a valid email address"})
    return value.lower()


def get_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        raise ValidationError("No data provided")
    return data
