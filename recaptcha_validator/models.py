"""
Typed model of the reCAPTCHA siteverify reply.

Decoding happens in two stages: the JSON fields are mapped onto the model
structurally, then ``challenge_ts`` is parsed as a strict RFC 3339
timestamp. An absent or empty timestamp is simply ``None``; a present but
malformed one fails the whole decode.
"""

import re
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from .exceptions import ResponseDecodeError

# Error codes documented by the siteverify API. Other codes may appear and
# are kept as plain strings.
ERROR_MISSING_INPUT_SECRET = "missing-input-secret"
ERROR_INVALID_INPUT_SECRET = "invalid-input-secret"
ERROR_MISSING_INPUT_RESPONSE = "missing-input-response"
ERROR_INVALID_INPUT_RESPONSE = "invalid-input-response"
ERROR_BAD_REQUEST = "bad-request"

_RFC3339_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:(?P<offset_minute>\d{2}))"
)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp such as ``2017-09-18T22:28:24Z``.

    The UTC offset is mandatory and the result is always timezone aware.
    Fractional seconds beyond microsecond precision are truncated.

    Raises:
        ValueError: if ``value`` is not a valid RFC 3339 timestamp
    """
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"challenge_ts is not an RFC 3339 timestamp: {value!r}")

    offset_minute = match.group("offset_minute")
    if offset_minute is not None and int(offset_minute) > 59:
        raise ValueError(f"challenge_ts has an invalid UTC offset: {value!r}")

    fraction = match.group("fraction") or ""
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"

    normalized = f"{match.group('date')}T{match.group('time')}"
    if fraction:
        normalized += "." + fraction[:6].ljust(6, "0")
    normalized += offset

    try:
        return datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"challenge_ts is out of range: {value!r}") from exc


class ValidationResponse(BaseModel):
    """Result of a single siteverify call"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # true if the token was accepted
    success: StrictBool = False

    # when the challenge was loaded
    challenge_timestamp: Optional[datetime] = Field(default=None, alias="challenge_ts")

    # site where the challenge was solved (web widgets)
    hostname: Optional[StrictStr] = None

    # package name of the app where the challenge was solved (Android)
    package_name: Optional[StrictStr] = Field(default=None, alias="apk_package_name")

    errors: List[StrictStr] = Field(default_factory=list, alias="error-codes")

    @field_validator("success", mode="before")
    @classmethod
    def null_success_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("errors", mode="before")
    @classmethod
    def null_errors_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("challenge_timestamp", mode="before")
    @classmethod
    def parse_challenge_timestamp(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("challenge_ts must be a string")
        return parse_rfc3339(value)

    @classmethod
    def from_json(cls, body: Union[bytes, str]) -> "ValidationResponse":
        """
        Decode a raw siteverify body.

        Raises:
            ResponseDecodeError: if the body is not a valid reply; no partial
                response is returned
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as exc:
            raw = body.encode("utf-8") if isinstance(body, str) else body
            raise ResponseDecodeError(
                f"Invalid siteverify response: {exc.error_count()} error(s)",
                body=raw,
            ) from exc
