class CaptchaError(Exception):
    """Base class for errors raised while validating reCAPTCHA tokens."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CaptchaConfigurationError(CaptchaError, ValueError):
    """
    Raised when the validator is constructed without a usable secret key.
    """


class ResponseDecodeError(CaptchaError, ValueError):
    """
    Raised when the siteverify reply cannot be decoded into a
    ValidationResponse: the body is not JSON, does not have the expected
    shape, or carries a challenge timestamp that is not RFC 3339.
    The raw body is kept on the exception for diagnostics.
    """

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body
