"""Persisting aggregated metrics as a JSON artifact."""

import json
import logging
import os
import tempfile
from typing import Dict

from .aggregator import metrics_to_dict
from .exceptions import ReportWriteError
from .models import UserMetrics


def default_report_filename(year: int) -> str:
    return f'pr_metrics_{year}.json'


def persist(metrics: Dict[str, UserMetrics], path: str) -> str:
    """Write the metrics mapping to a JSON file, replacing any previous file.

    The content is written to a temporary file in the same directory and
    renamed over the target, so a failed write leaves no partial artifact.

    Args:
        metrics: Mapping of username to UserMetrics
        path: Destination file path

    Returns:
        Absolute path to the written file

    Raises:
        ReportWriteError: If the file cannot be written
    """
    output_json = json.dumps(metrics_to_dict(metrics), indent=2)
    target_dir = os.path.dirname(os.path.abspath(path))

    tmp_path = None
    try:
        os.makedirs(target_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix='.pr_metrics_', suffix='.tmp')
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(output_json)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise ReportWriteError(f"Could not write metrics to {path}: {e}") from e

    logging.info(f"Results saved to {path}")
    return os.path.abspath(path)
