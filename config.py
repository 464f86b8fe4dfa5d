"""
JSON Diff Pro - Relaxed JSON formatting and structural comparison
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    APP_NAME: str = "JSON Diff Pro"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Formatting
    INDENT_WIDTH: int = 2   # spaces per level in formatted output
    TAB_WIDTH: int = 4      # spaces substituted for each tab while cleaning

    # Diagnostics
    CONTEXT_RADIUS: int = 1  # source lines shown before/after a syntax error

    # Comparison
    INLINE_DIFF_DEFAULT: bool = False  # attach word-level diffs to value changes

    # CORS - comma-separated list of allowed origins, or "*" for all
    # Example: "https://diff.example.com,http://localhost:3000"
    CORS_ORIGINS: str = "*"

    # Allowed hosts for Host header validation (comma-separated, or "*" to disable)
    ALLOWED_HOSTS: str = "*"

    # Maximum request body size in bytes (10MB default)
    MAX_REQUEST_SIZE: int = 10 * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
