"""CLI entry point: click group with `collect` (default) and `serve` commands."""

import logging
import os
import sys

import click
from dotenv import find_dotenv, load_dotenv

from .aggregator import aggregate_metrics
from .api_client import GitHubAPIClient
from .config import MetricsConfig
from .exceptions import ConfigError, LoadError, MetricsError
from .fetcher import fetch_pull_requests
from .models import UserMetrics
from .output import ChartPresenter
from .report_writer import default_report_filename, persist

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def configure_logging():
    """Configure root logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )
    # basicConfig is a no-op when handlers already exist
    logging.getLogger().setLevel(log_level)


def run_collect(config: MetricsConfig, client: GitHubAPIClient = None) -> str:
    """Fetch, aggregate and persist the metrics, then write the chart page.

    Args:
        config: Validated configuration
        client: API client to use (created from the configuration if omitted)

    Returns:
        Absolute path to the metrics artifact
    """
    if client is None:
        client = GitHubAPIClient(config.token, base_url=config.base_url, timeout=config.timeout)

    logging.info("Testing API access...")
    client.verify_access(config.owner, config.repo)

    pull_requests = fetch_pull_requests(client, config.owner, config.repo)
    metrics = aggregate_metrics(pull_requests, config.year)

    metrics_file = default_report_filename(config.year)
    artifact_path = persist(metrics, os.path.join(config.output_dir, metrics_file))

    presenter = ChartPresenter(metrics_file, config.year)
    presenter.save_html(config.output_dir)
    return artifact_path


def run_serve(config: MetricsConfig):
    """Serve the chart page and the metrics artifact of the configured year."""
    from .server import create_app

    if config.year is None:
        raise ConfigError("Missing required configuration: METRICS_YEAR")

    metrics_file = default_report_filename(config.year)
    presenter = ChartPresenter(metrics_file, config.year)
    metrics = presenter.load(os.path.join(config.output_dir, metrics_file))

    users = {user: UserMetrics.from_dict(data) for user, data in metrics.items()}
    total_prs = sum(user_metrics.total_prs_opened for user_metrics in users.values())
    logging.info(f"Artifact covers {len(users)} users and {total_prs} PRs")
    presenter.log_leaders(metrics)

    presenter.save_html(config.output_dir)

    app = create_app(config.output_dir, metrics_file)
    logging.info(f"Open http://localhost:{config.port}/ to view the charts")
    app.run(port=config.port)


def _load_config() -> MetricsConfig:
    try:
        return MetricsConfig.from_env(dotenv=False)
    except ConfigError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.pass_context
def main(ctx):
    """Per-user PR change-request metrics for a GitHub repository.

    \b
    Usage:
      pr-change-metrics              Collect metrics (default)
      pr-change-metrics collect      Collect metrics and write the chart page
      pr-change-metrics serve        Serve the chart page in a browser
    """
    # Load .env before logging so LOG_LEVEL from the file applies
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    if ctx.invoked_subcommand is None:
        ctx.invoke(collect_cmd)


@main.command("collect")
def collect_cmd():
    """Fetch PRs, aggregate metrics, write the JSON artifact and chart page."""
    config = _load_config()
    try:
        config.validate()
        config.log_summary()
        artifact_path = run_collect(config)
    except MetricsError as e:
        logging.error(f"Failed to collect metrics: {e}")
        sys.exit(1)
    click.echo(f"Metrics written to {artifact_path}")


@main.command("serve")
@click.option("--port", "-p", type=int, default=None, help="Port to serve on (default: CHARTS_PORT or 8000)")
def serve_cmd(port):
    """Serve the chart page and the metrics artifact over HTTP."""
    config = _load_config()
    if port is not None:
        config.port = port
    try:
        run_serve(config)
    except LoadError as e:
        logging.error(f"Cannot serve charts: {e}")
        sys.exit(1)
    except MetricsError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
