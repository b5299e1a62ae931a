"""Runner configuration.

Centralized configuration for BDD runs against the exchange API.
Values come from the command line, falling back to environment
variables (a local .env file is loaded when present).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Optional

from dotenv import load_dotenv

from exchange_bdd.errors import ValidationError

# =============================================================================
# DEFAULTS
# =============================================================================

# Relative directory where result snapshots are written
DEFAULT_OUTPUT_DIR = "out"

# Directory holding the pytest-bdd suite (feature files + step modules)
DEFAULT_SUITE_DIR = "features"

# Sent on every request to the exchange
USER_AGENT = "bdd-awesome-agent/1.0"

DEFAULT_TIMEOUT_SECONDS = 30.0

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_API_HOST = "EXCHANGE_API_HOST"
ENV_API_KEY = "EXCHANGE_API_KEY"
ENV_SECRET_KEY = "EXCHANGE_SECRET_KEY"
ENV_OTP = "EXCHANGE_OTP"
ENV_RESULT_FILE = "EXCHANGE_RESULT_FILE"
ENV_SUITE_DIR = "EXCHANGE_SUITE_DIR"
ENV_OUTPUT_DIR = "EXCHANGE_OUTPUT_DIR"

# Level name for the exchange_bdd.testing loggers (DEBUG shows every event)
ENV_LOG_LEVEL = "EXCHANGE_LOG_LEVEL"

# Required credentials, in the positional order of the command line
REQUIRED_FIELDS = (
    ("api_host", "the API host", "first"),
    ("api_key", "the API Key", "second"),
    ("secret_key", "the Secret Key", "third"),
    ("otp", "the otp", "fourth"),
)


# =============================================================================
# CONFIGURATION CLASS
# =============================================================================

@dataclass
class RunnerConfig:
    """Runtime configuration for one BDD run."""

    # Exchange credentials
    api_host: Optional[str] = None
    api_key: Optional[str] = None
    secret_key: Optional[str] = None
    otp: Optional[str] = None

    # Result snapshot file name (no snapshot when None)
    result_filename: Optional[str] = None

    # Paths
    suite_dir: str = DEFAULT_SUITE_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR

    # Passed through to pytest
    extra_pytest_args: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "RunnerConfig":
        """Load config from environment variables (and .env if present)."""
        if dotenv:
            load_dotenv()
        return cls(
            api_host=os.environ.get(ENV_API_HOST),
            api_key=os.environ.get(ENV_API_KEY),
            secret_key=os.environ.get(ENV_SECRET_KEY),
            otp=os.environ.get(ENV_OTP),
            result_filename=os.environ.get(ENV_RESULT_FILE),
            suite_dir=os.environ.get(ENV_SUITE_DIR, DEFAULT_SUITE_DIR),
            output_dir=os.environ.get(ENV_OUTPUT_DIR, DEFAULT_OUTPUT_DIR),
        )

    def merged(self, **overrides) -> "RunnerConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> "RunnerConfig":
        """Check that all credentials are present."""
        for attr, label, position in REQUIRED_FIELDS:
            value = getattr(self, attr)
            if not value or not value.strip():
                raise ValidationError(f"You must provide {label} as {position} parameter")
        return self


def get_config() -> RunnerConfig:
    """Get the configuration from the environment."""
    return RunnerConfig.from_env()
