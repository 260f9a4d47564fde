"""
Configuration Management for UnionEvent Applications

Dataclass configuration with per-environment defaults and environment
variable overrides, plus logging setup.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class WebConfig:
    """Web server configuration"""
    host: str = "localhost"
    port: int = 5001
    debug: bool = False
    live: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class DeepLinkConfig:
    """Deep-link configuration"""
    bundle_id: str = "com.example.unionevent"  # URL scheme the app answers to
    path: list = field(default_factory=lambda: ["Children"])
    query_key: str = "index"
    selection_target: str = "#selectedIndex"   # Receiver id for the selected item
    payload_key: str = "uuid"


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    deeplink: DeepLinkConfig = field(default_factory=DeepLinkConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.web.debug = True
            config.logging.level = "DEBUG"
        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"
        elif environment == Environment.PRODUCTION:
            config.web.host = "0.0.0.0"
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary. Unknown keys are ignored."""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for section in ("web", "logging", "deeplink"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        return config

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('UNIONEVENT_ENV', 'development')
        config = cls.for_environment(Environment(env_name))

        if os.getenv('UNIONEVENT_DEBUG'):
            config.debug = os.getenv('UNIONEVENT_DEBUG').lower() == 'true'

        if os.getenv('UNIONEVENT_HOST'):
            config.web.host = os.getenv('UNIONEVENT_HOST')

        if os.getenv('UNIONEVENT_PORT'):
            config.web.port = int(os.getenv('UNIONEVENT_PORT'))

        if os.getenv('UNIONEVENT_BUNDLE_ID'):
            config.deeplink.bundle_id = os.getenv('UNIONEVENT_BUNDLE_ID')

        if os.getenv('UNIONEVENT_LOG_LEVEL'):
            config.logging.level = os.getenv('UNIONEVENT_LOG_LEVEL').upper()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "web": {
                "host": self.web.host,
                "port": self.web.port,
                "debug": self.web.debug,
                "live": self.web.live,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
            "deeplink": {
                "bundle_id": self.deeplink.bundle_id,
                "path": list(self.deeplink.path),
                "query_key": self.deeplink.query_key,
                "selection_target": self.deeplink.selection_target,
                "payload_key": self.deeplink.payload_key,
            },
        }


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging configuration to the root logger."""
    logging.basicConfig(level=getattr(logging, config.level.upper(), logging.INFO), format=config.format)


# Global configuration management
_current_config: Optional[ApplicationConfig] = None


def set_config(config: Optional[ApplicationConfig]):
    """Set the global configuration (``None`` resets it)"""
    global _current_config
    _current_config = config


def get_config() -> ApplicationConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = ApplicationConfig.from_environment()

    return _current_config


__all__ = [
    "ApplicationConfig", "Environment", "WebConfig", "LoggingConfig", "DeepLinkConfig",
    "configure_logging", "set_config", "get_config",
]
