"""
Unit tests for data models
"""

import pytest
from datetime import datetime, timezone

from pr_change_metrics.models import PullRequest, Review, UserMetrics, parse_timestamp


class TestParseTimestamp:
    """Test cases for GitHub timestamp parsing."""

    def test_zulu_timestamp(self):
        parsed = parse_timestamp('2024-03-05T10:20:30Z')
        assert parsed == datetime(2024, 3, 5, 10, 20, 30, tzinfo=timezone.utc)

    def test_offset_timestamp_converted_to_utc(self):
        parsed = parse_timestamp('2025-01-01T01:00:00+02:00')
        assert parsed == datetime(2024, 12, 31, 23, 0, 0, tzinfo=timezone.utc)
        assert parsed.year == 2024

    def test_invalid_timestamp(self):
        with pytest.raises(ValueError):
            parse_timestamp('not a date')


class TestPullRequestFromNode:
    """Test cases for building PullRequest objects from GraphQL nodes."""

    def test_full_node(self):
        node = {
            'number': 42,
            'createdAt': '2024-06-01T08:00:00Z',
            'author': {'login': 'alice'},
            'reviews': {'nodes': [
                {'state': 'CHANGES_REQUESTED', 'author': {'login': 'bob'}},
                {'state': 'APPROVED', 'author': {'login': 'carol'}},
            ]}
        }

        pr = PullRequest.from_node(node)

        assert pr.number == 42
        assert pr.year == 2024
        assert pr.author == 'alice'
        assert pr.reviews == [Review('CHANGES_REQUESTED', 'bob'), Review('APPROVED', 'carol')]
        assert pr.reviews[0].requests_changes is True
        assert pr.reviews[1].requests_changes is False

    def test_deleted_author(self):
        node = {'number': 1, 'createdAt': '2024-06-01T08:00:00Z', 'author': None, 'reviews': {'nodes': []}}

        assert PullRequest.from_node(node).author is None

    def test_missing_reviews(self):
        node = {'number': 1, 'createdAt': '2024-06-01T08:00:00Z', 'author': {'login': 'alice'}}

        assert PullRequest.from_node(node).reviews == []

    def test_null_review_nodes_and_review_authors(self):
        node = {
            'number': 1,
            'createdAt': '2024-06-01T08:00:00Z',
            'author': {'login': 'alice'},
            'reviews': {'nodes': [None, {'state': 'CHANGES_REQUESTED', 'author': None}]}
        }

        pr = PullRequest.from_node(node)

        assert pr.reviews == [Review('CHANGES_REQUESTED', None)]


class TestUserMetrics:
    """Test cases for the UserMetrics dataclass."""

    def test_initialization(self):
        metrics = UserMetrics()
        assert metrics.prs_receiving_changes == 0
        assert metrics.changes_requested == 0
        assert metrics.total_prs_opened == 0
        assert metrics.change_request_ratio == 0

    def test_to_dict_uses_artifact_keys(self):
        metrics = UserMetrics(prs_receiving_changes=1, changes_requested=2, total_prs_opened=3,
                              change_request_ratio='33.3')

        assert metrics.to_dict() == {
            'prsReceivingChanges': 1,
            'changesRequested': 2,
            'totalPRsOpened': 3,
            'changeRequestRatio': '33.3',
        }

    def test_from_dict(self):
        data = {'prsReceivingChanges': 1, 'changesRequested': 0, 'totalPRsOpened': 2, 'changeRequestRatio': '50.0'}

        assert UserMetrics.from_dict(data) == UserMetrics(1, 0, 2, '50.0')
