# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.allowed_origins: Final[List[str]] = _split_csv(
            os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
        )
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "device_management")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )
        self.mongo_socket_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SOCKET_TIMEOUT_MS", "45000")
        )
        self.mongo_retry_delay_seconds: Final[float] = float(
            os.getenv("MONGO_RETRY_DELAY_SECONDS", "5")
        )
        self.mongo_connect_attempts: Final[int] = int(os.getenv("MONGO_CONNECT_ATTEMPTS", "2"))

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(7 * 24 * 60))
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
