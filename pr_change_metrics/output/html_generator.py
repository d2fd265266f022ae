"""HTML generation and file saving functions for ChartPresenter."""

import html
import logging
import os
from typing import Sequence

PAGE_FILENAME = 'index.html'


def render(self, container_ids: Sequence[str] = None) -> str:
    """Generate the charts container with one canvas per chart.

    Args:
        container_ids: Canvas element ids (defaults to the presenter's canvas ids)

    Returns:
        HTML fragment containing the charts container
    """
    canvas_ids = container_ids or self.canvas_ids
    parts = ['        <div class="charts-container">']
    for canvas_id in canvas_ids:
        parts.append(f'            <div class="chart-card"><canvas id="{html.escape(canvas_id)}"></canvas></div>')
    parts.append('        </div>')
    return '\n'.join(parts) + '\n'


def generate_html(self) -> str:
    """Generate the full chart page.

    Returns:
        HTML string that loads the metrics artifact and draws the charts
    """
    html_parts = []
    html_parts.append(self._generate_html_header())
    html_parts.append(self.render())
    html_parts.append(self._generate_chart_script())
    html_parts.append(self._generate_html_footer())
    return ''.join(html_parts)


def save_html(self, output_dir: str = None) -> str:
    """Generate and save the chart page next to the metrics artifact.

    Args:
        output_dir: Directory to save the page in (defaults to 'reports')

    Returns:
        Absolute path to the saved HTML file
    """
    html_content = self.generate_html()

    if output_dir is None:
        output_dir = os.path.join(os.getcwd(), 'reports')

    os.makedirs(output_dir, exist_ok=True)
    filepath = os.path.join(output_dir, PAGE_FILENAME)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(html_content)

    logging.info(f"Chart page saved to {filepath}")
    return os.path.abspath(filepath)
