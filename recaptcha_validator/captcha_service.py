"""
CAPTCHA Service for server-side token validation

This module validates Google reCAPTCHA response tokens against the
siteverify API and returns the typed reply.
"""

import logging
from typing import Dict, Optional

from .config import Settings, settings as default_settings
from .exceptions import CaptchaConfigurationError, ResponseDecodeError
from .models import ValidationResponse
from . import transport
from .transport import PostForm

logger = logging.getLogger(__name__)


class RecaptchaValidator:
    """Validates reCAPTCHA tokens using Google's siteverify API"""

    RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

    def __init__(self, secret: str, post_form: Optional[PostForm] = None):
        if not isinstance(secret, str) or not secret:
            raise CaptchaConfigurationError("reCAPTCHA secret key is not configured")

        self._secret = secret
        self._post_form = post_form if post_form is not None else transport.post_form

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, post_form: Optional[PostForm] = None
    ) -> "RecaptchaValidator":
        """
        Build a validator from RECAPTCHA_SECRET_KEY.
        """
        settings = settings or default_settings
        if not settings.secret_key:
            raise CaptchaConfigurationError("RECAPTCHA_SECRET_KEY is not configured")
        return cls(settings.secret_key, post_form=post_form)

    @property
    def secret(self) -> str:
        return self._secret

    def validate_token(self, token: str) -> ValidationResponse:
        """
        Check on Google's servers whether ``token`` is valid.

        Args:
            token: The reCAPTCHA response token from the frontend

        Returns:
            The decoded siteverify reply. A rejected token is not an error:
            ``success`` is False and ``errors`` lists the reasons.

        Raises:
            ResponseDecodeError: if the reply cannot be decoded
            Any exception raised by the transport, unchanged
        """
        return self._validate(token, None)

    def validate_token_for_ip(self, token: str, ip_address: str) -> ValidationResponse:
        """
        Check on Google's servers whether ``token`` is valid for ``ip_address``.

        Args:
            token: The reCAPTCHA response token from the frontend
            ip_address: Client IP address sent as ``remoteip``

        Returns:
            The decoded siteverify reply. A rejected token is not an error:
            ``success`` is False and ``errors`` lists the reasons.

        Raises:
            ResponseDecodeError: if the reply cannot be decoded
            Any exception raised by the transport, unchanged
        """
        return self._validate(token, ip_address)

    def _validate(self, token: str, ip_address: Optional[str]) -> ValidationResponse:
        data: Dict[str, str] = {
            "secret": self._secret,
            "response": token
        }

        if ip_address is not None:
            data["remoteip"] = ip_address

        logger.debug(
            "Submitting reCAPTCHA token for verification (ip scoped: %s)",
            ip_address is not None,
        )

        try:
            response = self._post_form(self.RECAPTCHA_VERIFY_URL, data)
        except Exception as e:
            logger.warning("reCAPTCHA verification request failed: %s", e)
            raise

        try:
            body = response.content
        finally:
            response.close()

        try:
            result = ValidationResponse.from_json(body)
        except ResponseDecodeError as e:
            logger.warning("reCAPTCHA verification reply could not be decoded: %s", e.__cause__)
            raise

        # Check if verification was successful
        if not result.success:
            logger.info("reCAPTCHA token rejected: %s", ", ".join(result.errors) or "no error codes")

        return result
