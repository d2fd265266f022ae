"""Chart presentation of the per-user metrics artifact."""

from .presenter_base import ChartPresenter, CANVAS_IDS, CHARTS
from .html_generator import PAGE_FILENAME

__all__ = [
    'ChartPresenter',
    'CANVAS_IDS',
    'CHARTS',
    'PAGE_FILENAME',
]
