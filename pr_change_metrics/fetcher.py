"""Fetching pull requests with their reviews."""

import logging
from typing import Dict, List

from .api_client import GitHubAPIClient
from .exceptions import GraphError
from .models import PullRequest
from .queries import PULL_REQUESTS_PAGE, PULL_REQUESTS_PATH


def _to_pull_request(node: Dict) -> PullRequest:
    try:
        return PullRequest.from_node(node)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        number = node.get('number', '?') if isinstance(node, dict) else '?'
        raise GraphError(f"Malformed pull request node #{number}: {e!r}") from e


def fetch_pull_requests(client: GitHubAPIClient, owner: str, repo: str) -> List[PullRequest]:
    """Fetch every pull request of a repository, newest first.

    Args:
        client: Configured GitHub API client
        owner: Repository owner
        repo: Repository name

    Returns:
        List of PullRequest objects with up to 100 reviews each

    Raises:
        GraphError: If a node lacks its number or has an unparseable createdAt
    """
    logging.info(f"Fetching pull requests for {owner}/{repo}...")
    nodes = client.fetch_all_pages(
        PULL_REQUESTS_PAGE,
        {'owner': owner, 'repo': repo},
        PULL_REQUESTS_PATH
    )
    pull_requests = [_to_pull_request(node) for node in nodes if node]
    logging.info(f"Found {len(pull_requests)} PRs in total.")
    return pull_requests
