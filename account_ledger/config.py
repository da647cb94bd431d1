"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .money import MAX_BALANCE


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""
    
    # Business rules configuration
    initial_balance: Decimal = Decimal("1000.00")
    
    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    @field_validator("initial_balance")
    @classmethod
    def check_initial_balance(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value < 0 or value > MAX_BALANCE:
            raise ValueError(f"initial_balance must be between 0.00 and {MAX_BALANCE}")
        return value
    
    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value
    
    class Config:
        env_prefix = "LEDGER_"
        case_sensitive = False


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
