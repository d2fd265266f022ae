"""
Unit tests for persisting the metrics artifact
"""

import json
import os
import pytest
from unittest.mock import patch

from pr_change_metrics.exceptions import ReportWriteError
from pr_change_metrics.models import UserMetrics
from pr_change_metrics.report_writer import default_report_filename, persist


@pytest.fixture
def metrics():
    return {
        'alice': UserMetrics(prs_receiving_changes=1, changes_requested=0, total_prs_opened=3,
                             change_request_ratio='33.3'),
        'bob': UserMetrics(changes_requested=1),
    }


class TestPersist:
    """Test cases for writing the JSON artifact."""

    def test_default_filename(self):
        assert default_report_filename(2024) == 'pr_metrics_2024.json'

    def test_writes_json(self, tmp_path, metrics):
        path = tmp_path / 'pr_metrics_2024.json'

        result = persist(metrics, str(path))

        assert result == os.path.abspath(str(path))
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        assert data == {
            'alice': {'prsReceivingChanges': 1, 'changesRequested': 0, 'totalPRsOpened': 3,
                      'changeRequestRatio': '33.3'},
            'bob': {'prsReceivingChanges': 0, 'changesRequested': 1, 'totalPRsOpened': 0,
                    'changeRequestRatio': 0},
        }

    def test_empty_mapping(self, tmp_path):
        path = tmp_path / 'empty.json'

        persist({}, str(path))

        assert json.loads(path.read_text(encoding='utf-8')) == {}

    def test_overwrites_existing_file(self, tmp_path, metrics):
        path = tmp_path / 'pr_metrics_2024.json'
        path.write_text('{"old": {}}', encoding='utf-8')

        persist(metrics, str(path))

        assert 'old' not in json.loads(path.read_text(encoding='utf-8'))

    def test_creates_parent_directory(self, tmp_path, metrics):
        path = tmp_path / 'nested' / 'reports' / 'pr_metrics_2024.json'

        persist(metrics, str(path))

        assert path.exists()

    def test_no_temporary_files_left(self, tmp_path, metrics):
        persist(metrics, str(tmp_path / 'pr_metrics_2024.json'))

        assert os.listdir(tmp_path) == ['pr_metrics_2024.json']

    def test_failed_write_raises_and_keeps_previous_file(self, tmp_path, metrics):
        path = tmp_path / 'pr_metrics_2024.json'
        path.write_text('{"previous": {}}', encoding='utf-8')

        with patch('pr_change_metrics.report_writer.os.replace', side_effect=OSError("disk full")):
            with pytest.raises(ReportWriteError, match='disk full'):
                persist(metrics, str(path))

        assert json.loads(path.read_text(encoding='utf-8')) == {'previous': {}}
        assert os.listdir(tmp_path) == ['pr_metrics_2024.json']

    def test_unwritable_directory(self, tmp_path, metrics):
        blocker = tmp_path / 'blocker'
        blocker.write_text('not a directory', encoding='utf-8')

        with pytest.raises(ReportWriteError):
            persist(metrics, str(blocker / 'pr_metrics_2024.json'))
