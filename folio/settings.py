from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    LATEST_POSTS_LIMIT: int = 3

    # Rendering
    HIGHLIGHT_STYLE: str = "default"
    TOC_DEPTH: str = "2-4"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
