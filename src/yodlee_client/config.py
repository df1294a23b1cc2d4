"""
Configuration management.

All configuration for the Yodlee client and its runner is defined here.
Values come from a YAML file; environment variables override the file:

- YODLEE_BASE_URL
- YODLEE_COBRAND_LOGIN
- YODLEE_COBRAND_PASSWORD
- YODLEE_TIMEOUT (request timeout in seconds)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .client import DEFAULT_BASE_URL, YodleeClient
from .models import TransactionSearchParams


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class YodleeConfig:
    """Cobrand credentials and transport settings."""

    cobrand_login: str
    cobrand_password: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 30
    # Transport-level retries; 0 keeps every operation to a single attempt
    max_retries: int = 0
    backoff_factor: float = 0.5


@dataclass
class TransactionDefaults:
    """Default transaction search window used by the runner."""

    container_type: str = "All"
    currency_code: str = "USD"
    start_number: int = 1
    end_number: int = 500

    def to_search_params(self) -> TransactionSearchParams:
        return TransactionSearchParams(
            container_type=self.container_type,
            lower_fetch_limit=str(self.start_number),
            higher_fetch_limit=str(self.end_number),
            start_number=self.start_number,
            end_number=self.end_number,
            currency_code=self.currency_code,
        )


@dataclass
class Config:
    """Application configuration."""

    yodlee: YodleeConfig
    transactions: TransactionDefaults = field(default_factory=TransactionDefaults)

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.yodlee.base_url:
            errors.append("yodlee.base_url is required")
        if not self.yodlee.cobrand_login:
            errors.append("yodlee.cobrand_login is required")
        if not self.yodlee.cobrand_password:
            errors.append("yodlee.cobrand_password is required")
        if self.yodlee.timeout_seconds <= 0:
            errors.append("yodlee.timeout_seconds must be positive")
        if self.yodlee.max_retries < 0:
            errors.append("yodlee.max_retries must not be negative")
        if self.yodlee.backoff_factor < 0:
            errors.append("yodlee.backoff_factor must not be negative")

        if self.transactions.start_number < 1:
            errors.append("transactions.start_number must be >= 1")
        if self.transactions.end_number < self.transactions.start_number:
            errors.append("transactions.end_number must be >= start_number")

        return errors


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigValidationError(f"{name} must be an integer, got {raw!r}") from e


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    A missing file yields defaults; environment variables override file values.
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    yodlee_data = data.get("yodlee", {})
    yodlee = YodleeConfig(
        base_url=os.environ.get("YODLEE_BASE_URL", yodlee_data.get("base_url", DEFAULT_BASE_URL)),
        cobrand_login=os.environ.get(
            "YODLEE_COBRAND_LOGIN", yodlee_data.get("cobrand_login", "")
        ),
        cobrand_password=os.environ.get(
            "YODLEE_COBRAND_PASSWORD", yodlee_data.get("cobrand_password", "")
        ),
        timeout_seconds=_env_int("YODLEE_TIMEOUT", yodlee_data.get("timeout_seconds", 30)),
        max_retries=yodlee_data.get("max_retries", 0),
        backoff_factor=yodlee_data.get("backoff_factor", 0.5),
    )

    tx_data = data.get("transactions", {})
    transactions = TransactionDefaults(
        container_type=tx_data.get("container_type", "All"),
        currency_code=tx_data.get("currency_code", "USD"),
        start_number=tx_data.get("start_number", 1),
        end_number=tx_data.get("end_number", 500),
    )

    return Config(yodlee=yodlee, transactions=transactions)


def build_client(config: Config) -> YodleeClient:
    """Create a YodleeClient from configuration."""
    return YodleeClient(
        login=config.yodlee.cobrand_login,
        password=config.yodlee.cobrand_password,
        base_url=config.yodlee.base_url,
        timeout=config.yodlee.timeout_seconds,
        max_retries=config.yodlee.max_retries,
        backoff_factor=config.yodlee.backoff_factor,
    )


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = f"""# Yodlee client configuration
#
# Environment variables override these values:
#   YODLEE_BASE_URL, YODLEE_COBRAND_LOGIN, YODLEE_COBRAND_PASSWORD, YODLEE_TIMEOUT

yodlee:
  base_url: "{DEFAULT_BASE_URL}"
  cobrand_login: "YOUR_COBRAND_LOGIN"
  cobrand_password: "YOUR_COBRAND_PASSWORD"
  timeout_seconds: 30
  max_retries: 0                 # Transport retries (0 = single attempt)
  backoff_factor: 0.5

# Default transaction search window
transactions:
  container_type: "All"
  currency_code: "USD"
  start_number: 1
  end_number: 500
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
