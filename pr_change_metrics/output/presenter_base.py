"""Loading the metrics artifact and preparing chart data."""

import json
import logging
import os
from typing import Dict, List, Tuple

import requests

from ..exceptions import LoadError

CANVAS_IDS = ('prChart1', 'prChart2', 'prChart3')

# key -> (artifact field, chart title, y axis label)
CHARTS = {
    'receiving': ('prsReceivingChanges', 'PRs Receiving Changes', 'Number of PRs'),
    'requesting': ('changesRequested', 'Changes Requested to Others', 'Number of Reviews'),
    'ratio': ('changeRequestRatio', '% PRs Needing Changes', 'Percentage'),
}

CHART_COLORS = {
    'receiving': {'background': 'rgba(255, 99, 132, 0.6)', 'border': 'rgba(255, 99, 132, 1)'},
    'requesting': {'background': 'rgba(54, 162, 235, 0.6)', 'border': 'rgba(54, 162, 235, 1)'},
    'ratio': {'background': 'rgba(75, 192, 192, 0.6)', 'border': 'rgba(75, 192, 192, 1)'},
}

LOAD_TIMEOUT = 10


def _to_number(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class ChartPresenter:
    """Renders the per-user metrics artifact as three bar charts."""

    def __init__(self, metrics_file: str, year: int = None, canvas_ids: Tuple[str, ...] = CANVAS_IDS):
        """Initialize the presenter.

        Args:
            metrics_file: File name of the JSON artifact, fetched by the page relative to itself
            year: Year the metrics cover, shown in the page title
            canvas_ids: Ids of the three canvas elements the charts are drawn on
        """
        self.metrics_file = metrics_file
        self.year = year
        self.canvas_ids = tuple(canvas_ids)

    def load(self, source: str) -> Dict[str, Dict]:
        """Load the metrics artifact from a file path or an http(s) URL.

        Args:
            source: Local path or URL of the JSON artifact

        Returns:
            Mapping of username to metrics dictionary

        Raises:
            LoadError: If the artifact is missing, malformed or not an object
        """
        logging.debug(f"Attempting to load JSON from: {source}")
        if source.startswith(('http://', 'https://')):
            try:
                response = requests.get(source, timeout=LOAD_TIMEOUT)
            except requests.exceptions.RequestException as e:
                raise LoadError(f"Could not load {source}: {e}") from e
            if not response.ok:
                raise LoadError(f"Could not load {source}: {response.status_code} {response.reason}")
            try:
                data = response.json()
            except ValueError as e:
                raise LoadError(f"Invalid JSON in {source}: {e}") from e
        else:
            if not os.path.exists(source):
                raise LoadError(f"Could not load {source}: file not found")
            try:
                with open(source, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise LoadError(f"Invalid JSON in {source}: {e}") from e
            except OSError as e:
                raise LoadError(f"Could not load {source}: {e}") from e

        if not isinstance(data, dict):
            raise LoadError(f"Invalid data format in {source}: expected an object")

        malformed = [user for user, entry in data.items() if not isinstance(entry, dict)]
        if malformed:
            raise LoadError(f"Invalid data format in {source}: entries for {', '.join(malformed)} are not objects")

        logging.info(f"Loaded metrics for {len(data)} users from {source}")
        return data

    def chart_series(self, metrics: Dict[str, Dict]) -> Dict[str, List[Tuple[str, float]]]:
        """Build the three chart datasets, each sorted descending by value.

        Ties keep the order of the metrics mapping.

        Args:
            metrics: Mapping of username to metrics dictionary

        Returns:
            Dictionary of chart key to list of (username, value) pairs
        """
        series = {}
        for key, (field_name, _title, _label) in CHARTS.items():
            values = [(user, _to_number((data or {}).get(field_name, 0))) for user, data in metrics.items()]
            series[key] = sorted(values, key=lambda item: item[1], reverse=True)
        return series

    def log_leaders(self, metrics: Dict[str, Dict], top: int = 3):
        """Log the top users of each chart."""
        for key, entries in self.chart_series(metrics).items():
            title = CHARTS[key][1]
            leaders = ', '.join(f"{user} ({value:g})" for user, value in entries[:top])
            logging.info(f"{title}: {leaders or 'no data'}")


# Import and attach methods from submodules
from .html_header import _generate_html_header, _generate_html_footer
from .chart_script import _generate_chart_script
from .html_generator import generate_html, render, save_html

ChartPresenter._generate_html_header = _generate_html_header
ChartPresenter._generate_html_footer = _generate_html_footer
ChartPresenter._generate_chart_script = _generate_chart_script
ChartPresenter.generate_html = generate_html
ChartPresenter.render = render
ChartPresenter.save_html = save_html
