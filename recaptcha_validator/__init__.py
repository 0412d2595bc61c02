"""Server-side validation of Google reCAPTCHA response tokens."""

from .captcha_service import RecaptchaValidator
from .config import Settings, settings
from .exceptions import CaptchaConfigurationError, CaptchaError, ResponseDecodeError
from .models import (
    ERROR_BAD_REQUEST,
    ERROR_INVALID_INPUT_RESPONSE,
    ERROR_INVALID_INPUT_SECRET,
    ERROR_MISSING_INPUT_RESPONSE,
    ERROR_MISSING_INPUT_SECRET,
    ValidationResponse,
    parse_rfc3339,
)

__all__ = [
    "CaptchaConfigurationError",
    "CaptchaError",
    "ERROR_BAD_REQUEST",
    "ERROR_INVALID_INPUT_RESPONSE",
    "ERROR_INVALID_INPUT_SECRET",
    "ERROR_MISSING_INPUT_RESPONSE",
    "ERROR_MISSING_INPUT_SECRET",
    "RecaptchaValidator",
    "ResponseDecodeError",
    "Settings",
    "ValidationResponse",
    "parse_rfc3339",
    "settings",
]
