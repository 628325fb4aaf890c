"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_vars, parse_flag
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .traduora import (
    ClientCredentials,
    Credentials,
    PasswordLogin,
    TraduoraConfig,
    get_traduora_config,
)

__all__ = [
    "ClientCredentials",
    "ConfigurationError",
    "Credentials",
    "MissingConfigurationError",
    "PasswordLogin",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "TraduoraConfig",
    "configure_logging",
    "get_traduora_config",
    "optional_env_vars",
    "parse_flag",
]
