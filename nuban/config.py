"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class NubanConfig(BaseSettings):
    """NUBAN validator configuration"""

    # Payment provider configuration
    api_key: Optional[str] = None  # NUBAN_API_KEY env var
    payment_provider: str = "PAYSTACK"  # PAYSTACK or FLUTTERWAVE
    request_timeout: float = 10.0
    check_digit_precheck: bool = False  # Reject known banks failing the NUBAN check before calling out

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    class Config:
        env_prefix = "NUBAN_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = NubanConfig()


def get_config() -> NubanConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> NubanConfig:
    """Reload configuration from environment"""
    global config
    config = NubanConfig()
    return config
