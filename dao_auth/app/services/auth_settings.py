from pydantic import BaseModel, Field


class AuthSettings(BaseModel):
    """Lifetimes and password rules consumed by the auth use cases"""

    access_token_ttl_minutes: int = Field(default=7 * 24 * 60, gt=0)
    temporary_password_ttl_hours: int = Field(default=24, gt=0)
    reset_code_ttl_minutes: int = Field(default=15, gt=0)
    reset_code_max_attempts: int = Field(default=5, gt=0)
    min_password_length: int = Field(default=6, gt=0)

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        return cls(
            access_token_ttl_minutes=config.ACCESS_TOKEN_TTL_MINUTES,
            temporary_password_ttl_hours=config.TEMPORARY_PASSWORD_TTL_HOURS,
            reset_code_ttl_minutes=config.RESET_CODE_TTL_MINUTES,
            reset_code_max_attempts=config.RESET_CODE_MAX_ATTEMPTS,
            min_password_length=config.MIN_PASSWORD_LENGTH,
        )
