"""
Configuration management using Pydantic Settings
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/app/core/config.py
# Project root is: backend/app/core/../../../
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
PROJECT_ROOT = _backend_dir.parent
ENV_FILE = PROJECT_ROOT / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=True)

FRONTEND_DIR = PROJECT_ROOT / "frontend"

ROTATION_WHEN = ("midnight", "W0", "W1", "W2", "W3", "W4", "W5", "W6")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "IPL Auction"
    app_env: str = Field(default="development", description="Application environment")
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    allowed_origins: str = Field(
        default="http://localhost:8000",
        description="Allowed CORS origins (comma-separated)"
    )

    # Logging
    log_uvicorn_access: bool = Field(default=False, description="Enable Uvicorn access logging")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"app.api": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=True, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/ipl_auction.log",
        description="Path to log file (relative to project root)"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation: 'midnight' or 'W0'..'W6' (weekly)"
    )
    log_file_retention: int = Field(
        default=30,
        ge=1,
        description="Number of days to keep log files"
    )
    log_sensitive_data: bool = Field(
        default=False,
        description="Enable logging of sensitive data (passwords, tokens) - NOT RECOMMENDED"
    )

    # Web
    static_url_path: str = Field(default="/static", description="URL prefix for static assets")
    templates_dir: Optional[str] = Field(default=None, description="Override for the templates directory")
    static_dir: Optional[str] = Field(default=None, description="Override for the static assets directory")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only json and text formats are supported"""
        v = v.strip().lower()
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Level must be a standard logging level name"""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return v

    @field_validator("log_module_levels")
    @classmethod
    def validate_log_module_levels(cls, v: Optional[str]) -> Optional[str]:
        """JSON object mapping logger names to standard level names"""
        if v is None:
            return v
        try:
            levels = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"log_module_levels is not valid JSON: {e}") from e
        if not isinstance(levels, dict):
            raise ValueError("log_module_levels must be a JSON object")
        for module, level in levels.items():
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                raise ValueError(f"Invalid log level {level!r} for {module!r}")
        return v

    @field_validator("log_file_rotation")
    @classmethod
    def validate_log_file_rotation(cls, v: str) -> str:
        """Rotation must be a TimedRotatingFileHandler 'when' value"""
        if v not in ROTATION_WHEN:
            raise ValueError(f"log_file_rotation must be one of {', '.join(ROTATION_WHEN)}")
        return v

    @field_validator("static_url_path")
    @classmethod
    def normalize_static_url_path(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash"""
        return "/" + v.strip("/")

    @property
    def module_levels(self) -> Dict[str, str]:
        """Per-logger level overrides parsed from log_module_levels"""
        if not self.log_module_levels:
            return {}
        return {module: level.upper() for module, level in json.loads(self.log_module_levels).items()}

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def resolved_templates_dir(self) -> Path:
        """Templates directory, defaulting to frontend/templates"""
        if self.templates_dir:
            return Path(self.templates_dir).resolve()
        return FRONTEND_DIR / "templates"

    @property
    def resolved_static_dir(self) -> Path:
        """Static assets directory, defaulting to frontend/static"""
        if self.static_dir:
            return Path(self.static_dir).resolve()
        return FRONTEND_DIR / "static"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
