"""
Configuration management for syndication_ext.

Uses Pydantic for validation and pydantic-settings for environment variable support.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoadSettings(BaseSettings):
    """Settings consulted while loading syndication resources.

    The timeout is forwarded to whatever retrieves the resource; the
    extension core itself never waits on anything.
    """

    model_config = SettingsConfigDict(env_prefix="SYNDICATION_LOAD_")

    extensions_enabled: bool = Field(default=True, description="Auto-detect and load extensions")
    timeout_seconds: int = Field(default=15, ge=1, le=300, description="Retrieval timeout")


class WriteSettings(BaseSettings):
    """Settings consulted while writing syndication resources."""

    model_config = SettingsConfigDict(env_prefix="SYNDICATION_WRITE_")

    indent: bool = Field(default=True, description="Pretty-print output")
    xml_declaration: bool = Field(default=True, description="Emit the XML declaration")
    encoding: str = Field(default="utf-8", description="Output character encoding")

    @field_validator("encoding")
    @classmethod
    def normalize_encoding(cls, v: str) -> str:
        """Normalize encoding name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Encoding must not be empty")
        return v


class ComparisonConfig(BaseSettings):
    """Entity comparison configuration."""

    model_config = SettingsConfigDict(env_prefix="SYNDICATION_COMPARE_")

    mode: str = Field(
        default="lexicographic",
        description="Field combination rule: lexicographic or bitwise_or"
    )

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Validate comparison mode."""
        v = v.lower().strip().replace("-", "_")
        valid_modes = ["lexicographic", "bitwise_or"]
        if v not in valid_modes:
            raise ValueError(f"Invalid comparison mode: {v!r}. Must be one of {valid_modes}")
        return v


class TrackbackClientConfig(BaseSettings):
    """Trackback client settings.

    Host-facing only: nothing in this library sends pings or reads these
    values. Host applications read them from ``get_config().trackback``.
    """

    model_config = SettingsConfigDict(env_prefix="TRACKBACK_")

    timeout_seconds: int = Field(default=15, ge=1, le=300, description="Ping timeout")
    user_agent: str = Field(default="", description="User-Agent header")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Log format"
    )

    # File logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: str = Field(default="logs/syndication_ext.log", description="Log file path")
    rotation: str = Field(default="100 MB", description="Log rotation size")
    retention: str = Field(default="30 days", description="Log retention period")

    # Console logging
    console_enabled: bool = Field(default=True, description="Enable console logging")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v


class Config(BaseSettings):
    """Main configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SYNDICATION_",
        case_sensitive=False,
    )

    version: str = Field(default="0.1.0", description="Library version")
    debug: bool = Field(default=False, description="Debug mode")

    # Sub-configurations
    load: LoadSettings = Field(default_factory=LoadSettings)
    write: WriteSettings = Field(default_factory=WriteSettings)
    comparison: ComparisonConfig = Field(default_factory=ComparisonConfig)
    trackback: TrackbackClientConfig = Field(default_factory=TrackbackClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


_NESTED_CONFIGS = {
    "load": LoadSettings,
    "write": WriteSettings,
    "comparison": ComparisonConfig,
    "trackback": TrackbackClientConfig,
    "logging": LoggingConfig,
}

# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def load_config_from_yaml(yaml_path: str) -> Config:
    """Load configuration from a YAML file.

    Note: Values loaded from YAML take precedence over environment variables.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        Config instance loaded from the file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

    with yaml_file.open("r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    main_config = {}
    nested_configs = {}

    for key, value in config_dict.items():
        if key in _NESTED_CONFIGS:
            nested_configs[key] = value
        else:
            main_config[key] = value

    # Nested configs are built individually so env vars still apply to unset fields
    for key, config_class in _NESTED_CONFIGS.items():
        if key in nested_configs:
            nested_configs[key] = config_class(**(nested_configs[key] or {}))
        else:
            nested_configs[key] = config_class()

    main_config.update(nested_configs)
    return Config(**main_config)


def reload_config(yaml_path: Optional[str] = None) -> Config:
    """Reload configuration from environment and an optional YAML file."""
    global _config
    _config = None

    if yaml_path and Path(yaml_path).exists():
        _config = load_config_from_yaml(yaml_path)
    else:
        _config = Config()

    return _config
