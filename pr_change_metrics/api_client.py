"""GitHub GraphQL API client with cursor pagination."""

import json
import logging
from typing import Dict, List, Optional

import requests

from .exceptions import AccessError, AuthError, GraphError, NetworkError
from .queries import TEST_ACCESS

GRAPHQL_URL = 'https://api.github.com/graphql'
DEFAULT_TIMEOUT = 10


class GitHubAPIClient:
    """Sends GraphQL queries to the GitHub API and follows paginated connections."""

    def __init__(self, token: str, base_url: str = GRAPHQL_URL, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: GraphQL endpoint URL
            timeout: Timeout in seconds for each request
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'bearer {self.token}',
            'Content-Type': 'application/json'
        })
        logging.info(f"Initialized GitHub API client for {self.base_url}")

    def post_graphql(self, query: str, variables: Dict = None) -> Dict:
        """Make a GraphQL query to the GitHub API.

        Args:
            query: GraphQL query string
            variables: Optional query variables

        Returns:
            The `data` object of the response

        Raises:
            NetworkError: On transport failures, timeouts and unexpected statuses
            AuthError: If the token is rejected
            AccessError: If the request is forbidden
            GraphError: If the response carries GraphQL errors or is not JSON
        """
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        logging.debug(f"GraphQL request variables: {json.dumps(variables or {})}")

        try:
            response = self.session.post(self.base_url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logging.error(f"GraphQL request timed out after {self.timeout}s: {e}")
            raise NetworkError(f"Request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logging.error(f"GraphQL request failed: {e}")
            raise NetworkError(f"Request failed: {e}") from e

        if response.status_code == 401:
            raise AuthError("GitHub API rejected the token (401 Unauthorized)")

        if response.status_code == 403:
            logging.error(f"Access forbidden or rate limit exceeded. Response: {response.text}")
            raise AccessError("GitHub API denied access (403 Forbidden)")

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise NetworkError(f"GitHub API returned {response.status_code}: {e}",
                               status_code=response.status_code) from e

        try:
            result = response.json()
        except ValueError as e:
            raise GraphError(f"Invalid JSON response: {e}") from e

        if not isinstance(result, dict):
            raise GraphError(f"Unexpected response shape: {type(result).__name__}")

        # Check for GraphQL errors
        errors = result.get("errors")
        if errors:
            logging.error(f"GraphQL errors: {json.dumps(errors, indent=2)}")
            if not isinstance(errors, list):
                errors = [errors]
            first = errors[0]
            if not isinstance(first, dict):
                raise GraphError(f"GraphQL query failed: {first}", errors=errors)
            raise GraphError(
                "GraphQL query failed: " + str(first.get("message", first)),
                error_type=first.get("type"),
                errors=errors
            )

        data = result.get("data") or {}
        if not isinstance(data, dict):
            raise GraphError(f"Unexpected response shape: data is {type(data).__name__}")
        return data

    def fetch_all_pages(self, query: str, variables: Dict, connection_path: List[str]) -> List[Dict]:
        """Fetch every page of a cursor-paginated GraphQL connection.

        The query must declare a `$cursor: String` variable and select
        `pageInfo { hasNextPage endCursor }` and `nodes` on the connection.

        Args:
            query: GraphQL query string
            variables: Query variables (the cursor is managed here)
            connection_path: Keys leading from `data` to the connection
                (e.g. ["repository", "pullRequests"])

        Returns:
            List of all nodes from all pages, in the order received
        """
        results = []
        cursor: Optional[str] = None
        variables = dict(variables or {})
        page = 1

        while True:
            page_variables = dict(variables, cursor=cursor)
            logging.debug(f"Fetching page {page} of {'.'.join(connection_path)}")
            data = self.post_graphql(query, page_variables)

            connection = data
            for key in connection_path:
                connection = connection.get(key) if isinstance(connection, dict) else None
            if connection is None:
                raise AccessError(f"Connection {'.'.join(connection_path)} is not accessible")

            nodes = connection.get('nodes') or []
            results.extend(nodes)

            page_info = connection.get('pageInfo') or {}
            has_next_page = page_info.get('hasNextPage', False)
            logging.info(f"Fetched {len(nodes)} nodes. Has more pages: {has_next_page}")

            cursor = page_info.get('endCursor')
            if not has_next_page or cursor is None:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total nodes in {page} page(s)")
        return results

    def verify_access(self, owner: str, repo: str) -> str:
        """Check that the token authenticates and can read the repository.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Login of the authenticated user

        Raises:
            AuthError: If the viewer cannot be resolved
            AccessError: If the repository cannot be read
        """
        try:
            data = self.post_graphql(TEST_ACCESS, {'owner': owner, 'repo': repo})
        except GraphError as e:
            if e.error_type == 'NOT_FOUND':
                raise AccessError(f"Cannot access repository: {owner}/{repo}") from e
            raise

        viewer = data.get('viewer')
        if not viewer or not viewer.get('login'):
            raise AuthError("Failed to authenticate with GitHub API")
        logging.info(f"Authenticated as: {viewer['login']}")

        repository = data.get('repository')
        if not repository:
            raise AccessError(f"Cannot access repository: {owner}/{repo}")
        logging.info(f"Repository access confirmed: {repository['nameWithOwner']}")

        return viewer['login']
