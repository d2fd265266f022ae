"""Per-user change-request aggregation over pull requests."""

import logging
from collections import defaultdict
from typing import Dict, Iterable, Set, Union

from .models import PullRequest, UserMetrics

UNKNOWN_AUTHOR = 'unknown'


def compute_ratio(prs_receiving_changes: int, total_prs_opened: int) -> Union[str, int]:
    """Percentage of opened PRs that received change requests.

    Returns:
        The percentage formatted with one decimal digit (e.g. "33.3"),
        or the integer 0 when the user opened no PRs
    """
    if total_prs_opened <= 0:
        return 0
    return f"{prs_receiving_changes / total_prs_opened * 100:.1f}"


def _change_request_reviewers(pr: PullRequest) -> Set[str]:
    """Distinct reviewers that requested changes at least once on the PR."""
    return {
        review.author
        for review in pr.reviews
        if review.requests_changes and review.author
    }


def aggregate_metrics(pull_requests: Iterable[PullRequest], year: int) -> Dict[str, UserMetrics]:
    """Aggregate change-request metrics per user for PRs created in `year`.

    PRs created in any other year are ignored completely, including their
    reviews. PRs without an author are attributed to UNKNOWN_AUTHOR; reviews
    without an author are ignored.

    Args:
        pull_requests: Pull requests with their reviews
        year: Calendar year (UTC) of PR creation to include

    Returns:
        Mapping of username to UserMetrics
    """
    metrics: Dict[str, UserMetrics] = defaultdict(UserMetrics)
    processed = 0

    for pr in pull_requests:
        if pr.year != year:
            continue

        pr_author = pr.author or UNKNOWN_AUTHOR
        author_metrics = metrics[pr_author]
        author_metrics.total_prs_opened += 1

        reviewers = _change_request_reviewers(pr)
        for reviewer in sorted(reviewers):
            metrics[reviewer].changes_requested += 1

        if reviewers:
            author_metrics.prs_receiving_changes += 1

        processed += 1
        logging.debug(f"Processed PR #{pr.number} by {pr_author}")

    for user_metrics in metrics.values():
        user_metrics.change_request_ratio = compute_ratio(
            user_metrics.prs_receiving_changes,
            user_metrics.total_prs_opened
        )

    logging.info(f"Aggregated {processed} PRs from {year} into metrics for {len(metrics)} users")
    return dict(metrics)


def metrics_to_dict(metrics: Dict[str, UserMetrics]) -> Dict[str, Dict[str, Union[str, int]]]:
    """Convert aggregated metrics into the JSON-ready artifact shape."""
    return {user: user_metrics.to_dict() for user, user_metrics in metrics.items()}
