"""PR Change Request Metrics - per-user change-request statistics for GitHub repositories."""

from .models import PullRequest, Review, UserMetrics
from .api_client import GitHubAPIClient
from .config import MetricsConfig
from .aggregator import aggregate_metrics, metrics_to_dict, UNKNOWN_AUTHOR
from .fetcher import fetch_pull_requests
from .report_writer import persist, default_report_filename
from .output import ChartPresenter
from .exceptions import (
    MetricsError,
    ConfigError,
    AuthError,
    AccessError,
    GraphError,
    NetworkError,
    ReportWriteError,
    LoadError,
)

__all__ = [
    'PullRequest',
    'Review',
    'UserMetrics',
    'GitHubAPIClient',
    'MetricsConfig',
    'aggregate_metrics',
    'metrics_to_dict',
    'UNKNOWN_AUTHOR',
    'fetch_pull_requests',
    'persist',
    'default_report_filename',
    'ChartPresenter',
    'MetricsError',
    'ConfigError',
    'AuthError',
    'AccessError',
    'GraphError',
    'NetworkError',
    'ReportWriteError',
    'LoadError',
]
