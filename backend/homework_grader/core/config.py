"""
Core configuration module for the Homework Grader backend.
Loads configuration from YAML file and secrets from environment variables.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8090
    debug: bool = False


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = "data/homework.db"


class DriveConfig(BaseModel):
    """Google Drive storage configuration."""

    root_folder_id: str = ""
    upload_mime_type: str = "application/pdf"


class LLMConfig(BaseModel):
    """LLM provider configuration used for grading."""

    provider: str = "groq"
    model: str = "llama-3.2-90b-vision-preview"
    temperature: float = 0.3
    timeout: int = 300


class LoggingConfig(BaseModel):
    """Logging configuration."""

    file: str = "app.log"
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_format: str = "%(levelname)s %(name)s: %(message)s"
    max_size: int = 10  # MB
    backup_count: int = 5


class AppConfig(BaseModel):
    """Main application configuration.

    Credentials are not read from YAML; see Secrets.
    """

    server: ServerConfig = ServerConfig()
    database: DatabaseConfig = DatabaseConfig()
    drive: DriveConfig = DriveConfig()
    llm: LLMConfig = LLMConfig()
    logging: LoggingConfig = LoggingConfig()


class Secrets(BaseSettings):
    """Credentials for the external services, read from the environment or .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    groq_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    google_client_id: Optional[str] = None
    google_client_secret: Optional[str] = None
    google_redirect_uri: Optional[str] = None
    google_refresh_token: Optional[str] = None
    google_root_folder_id: Optional[str] = None


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses default location.

    Returns:
        AppConfig instance with loaded configuration.
    """
    if config_path is None:
        config_path = os.environ.get("HOMEWORK_GRADER_CONFIG")
        if config_path is None:
            config_path = get_project_root() / "config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
            return AppConfig(**config_data)

    return AppConfig()


# Global configuration instances
_config: Optional[AppConfig] = None
_secrets: Optional[Secrets] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_secrets() -> Secrets:
    """Get the global secrets instance."""
    global _secrets
    if _secrets is None:
        _secrets = Secrets()
    return _secrets


def get_root_folder_id() -> str:
    """Drive root folder: the GOOGLE_ROOT_FOLDER_ID secret wins over config.yaml."""
    return get_secrets().google_root_folder_id or get_config().drive.root_folder_id


def _resolve_data_dir() -> Path:
    """
    Resolve the data directory path.

    Supports two modes:
    1. Container mode: DATA_DIR environment variable is set (e.g., /app/data)
    2. Local development: Uses project root/data

    Returns:
        Absolute path to the data directory.
    """
    data_dir_env = os.environ.get("DATA_DIR")

    if data_dir_env:
        return Path(data_dir_env).resolve()
    return (get_project_root() / "data").resolve()


def get_database_path() -> Path:
    """
    Get the absolute path to the SQLite database file.

    - Container: /app/data/homework.db
    - Local: project_root/data/homework.db
    """
    config = get_config()

    # e.g., "data/homework.db" -> "homework.db"
    db_filename = Path(config.database.path).name

    db_path = (_resolve_data_dir() / db_filename).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


def get_log_path() -> Path:
    """
    Get the absolute path to the log file.

    - Container: $LOGS_DIR/app.log
    - Local: project_root/logs/app.log
    """
    config = get_config()

    logs_dir_env = os.environ.get("LOGS_DIR")

    if logs_dir_env:
        log_dir = Path(logs_dir_env)
    else:
        log_dir = get_project_root() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    # Use only the filename from config so logs never go outside logs/
    name = Path(config.logging.file).name or "app.log"
    return log_dir / name
