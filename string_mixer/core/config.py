from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "String Mixer"

    # Base for the links handed out to users (verify, reset, invite)
    APP_URL: str = "http://localhost:3000"

    # Codec knobs. Defaults keep the legacy key layout (16-character keys).
    MIXER_KEY_WIDTH: Optional[int] = 16
    MIXER_SALT_LENGTH: int = 10
    MIXER_STRICT: bool = False

    LOG_LEVEL: str = "INFO"

    @field_validator('MIXER_KEY_WIDTH')
    def validate_key_width(cls, v):
        # 0 disables truncation
        if v is None or v == 0:
            return None
        if v < 2:
            raise ValueError('MIXER_KEY_WIDTH must be 0 (unbounded) or at least 2')
        return v

    @field_validator('MIXER_SALT_LENGTH')
    def validate_salt_length(cls, v):
        if v < 0:
            raise ValueError('MIXER_SALT_LENGTH must not be negative')
        return v

    class Config:
        env_file = ".env"

settings = Settings()
