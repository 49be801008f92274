from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ROLES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Blog Backend"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO")
    host: str = "127.0.0.1"
    port: int = 8000

    # Mock identity used wherever a real session would be consulted.
    mock_user_id: int = 1
    mock_user_role: str = "admin"
    mock_token: str = "fake-jwt-token-123"

    registered_username: str = "user"
    registered_role: str = "author"

    seed_demo_data: bool = False

    @field_validator("mock_user_role", "registered_role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        if value not in ROLES:
            raise ValueError(f"role must be one of: {', '.join(ROLES)}")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
