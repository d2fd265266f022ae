"""Data models for PR change-request metrics."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

CHANGES_REQUESTED = 'CHANGES_REQUESTED'

GITHUB_TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp into an aware UTC datetime."""
    try:
        parsed = datetime.strptime(value, GITHUB_TIMESTAMP_FORMAT)
        return parsed.replace(tzinfo=timezone.utc)
    except ValueError:
        # Offsets such as '+02:00' or fractional seconds
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)


def _login(actor: Optional[Dict]) -> Optional[str]:
    """Return the login of a GraphQL actor object, or None for deleted/ghost users."""
    if not actor:
        return None
    return actor.get('login') or None


@dataclass
class Review:
    """A single review left on a pull request."""
    state: str
    author: Optional[str] = None

    @classmethod
    def from_node(cls, node: Dict) -> 'Review':
        return cls(state=node.get('state', ''), author=_login(node.get('author')))

    @property
    def requests_changes(self) -> bool:
        return self.state == CHANGES_REQUESTED


@dataclass
class PullRequest:
    """A pull request together with its reviews."""
    number: int
    created_at: datetime
    author: Optional[str] = None
    reviews: List[Review] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: Dict) -> 'PullRequest':
        """Build a PullRequest from a node of the pullRequests GraphQL connection.

        Args:
            node: GraphQL node with number, createdAt, author and reviews

        Returns:
            PullRequest instance
        """
        review_nodes = (node.get('reviews') or {}).get('nodes') or []
        return cls(
            number=node['number'],
            created_at=parse_timestamp(node['createdAt']),
            author=_login(node.get('author')),
            reviews=[Review.from_node(review) for review in review_nodes if review],
        )

    @property
    def year(self) -> int:
        return self.created_at.year


@dataclass
class UserMetrics:
    """Change-request statistics for a single user."""
    prs_receiving_changes: int = 0  # PRs by this user that received change requests
    changes_requested: int = 0  # PRs on which this user requested changes
    total_prs_opened: int = 0
    change_request_ratio: Union[str, int] = 0

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            'prsReceivingChanges': self.prs_receiving_changes,
            'changesRequested': self.changes_requested,
            'totalPRsOpened': self.total_prs_opened,
            'changeRequestRatio': self.change_request_ratio,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'UserMetrics':
        return cls(
            prs_receiving_changes=data.get('prsReceivingChanges', 0),
            changes_requested=data.get('changesRequested', 0),
            total_prs_opened=data.get('totalPRsOpened', 0),
            change_request_ratio=data.get('changeRequestRatio', 0),
        )
