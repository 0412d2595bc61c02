from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # reCAPTCHA settings
    RECAPTCHA_SECRET_KEY: str = ""

    # HTTP settings for the default transport
    RECAPTCHA_TIMEOUT_SECONDS: float = 5.0

    @field_validator("RECAPTCHA_TIMEOUT_SECONDS")
    @classmethod
    def timeout_must_be_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("RECAPTCHA_TIMEOUT_SECONDS must be positive")
        return value

    @property
    def secret_key(self) -> str:
        """Secret key with surrounding whitespace removed"""
        return self.RECAPTCHA_SECRET_KEY.strip()

    class Config:
        env_file = ".env"  # Tells Pydantic to load from .env
        extra = "ignore"


# Instantiate settings once
settings = Settings()
