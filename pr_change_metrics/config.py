"""
Configuration for the PR metrics run.

Values are read from the environment, optionally populated from a .env
file. Owner, repository, token and target year are required; everything
else has a default.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .api_client import DEFAULT_TIMEOUT, GRAPHQL_URL
from .exceptions import ConfigError

DEFAULT_OUTPUT_DIR = 'reports'
DEFAULT_PORT = 8000

REQUIRED_VARIABLES = {
    'owner': 'GITHUB_OWNER',
    'repo': 'GITHUB_REPO',
    'token': 'GITHUB_TOKEN',
    'year': 'METRICS_YEAR',
}


def _parse_int(name: str, value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigError(f"Invalid {name} value '{value}': expected an integer")


@dataclass
class MetricsConfig:
    """Settings for one metrics run."""
    owner: Optional[str] = None
    repo: Optional[str] = None
    token: Optional[str] = None
    year: Optional[int] = None
    base_url: str = GRAPHQL_URL
    timeout: int = DEFAULT_TIMEOUT
    output_dir: str = DEFAULT_OUTPUT_DIR
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None, dotenv: bool = True) -> 'MetricsConfig':
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            dotenv: Whether to load a .env file into os.environ first

        Returns:
            MetricsConfig instance (not yet validated)

        Raises:
            ConfigError: If an integer setting cannot be parsed
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        if environ is None:
            environ = os.environ

        def get(name: str) -> Optional[str]:
            value = environ.get(name)
            return value.strip() if value and value.strip() else None

        return cls(
            owner=get('GITHUB_OWNER'),
            repo=get('GITHUB_REPO'),
            token=get('GITHUB_TOKEN'),
            year=_parse_int('METRICS_YEAR', get('METRICS_YEAR')),
            base_url=get('GITHUB_GRAPHQL_URL') or GRAPHQL_URL,
            timeout=_parse_int('GITHUB_TIMEOUT', get('GITHUB_TIMEOUT'), DEFAULT_TIMEOUT),
            output_dir=get('OUTPUT_DIR') or DEFAULT_OUTPUT_DIR,
            port=_parse_int('CHARTS_PORT', get('CHARTS_PORT'), DEFAULT_PORT),
        )

    def missing(self) -> List[str]:
        """Names of the environment variables whose required value is absent."""
        return [env_name for field_name, env_name in REQUIRED_VARIABLES.items()
                if getattr(self, field_name) in (None, '')]

    def validate(self) -> 'MetricsConfig':
        """Check that every required value is present.

        Raises:
            ConfigError: Naming all missing values
        """
        missing = self.missing()
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
        if self.timeout <= 0:
            raise ConfigError(f"Invalid GITHUB_TIMEOUT value '{self.timeout}': must be positive")
        return self

    def masked_token(self) -> str:
        if not self.token:
            return 'missing'
        if len(self.token) <= 8:
            return '****'
        return f"{self.token[:4]}...{self.token[-4:]}"

    def log_summary(self):
        """Log the configuration without revealing the full token."""
        summary: Dict[str, object] = {
            'owner': self.owner,
            'repo': self.repo,
            'year': self.year,
            'baseUrl': self.base_url,
            'token': self.masked_token(),
        }
        logging.info(f"Configuration: {summary}")
