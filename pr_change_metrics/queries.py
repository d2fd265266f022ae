"""GraphQL query strings."""

TEST_ACCESS = """
query TestAccess($owner: String!, $repo: String!) {
  viewer {
    login
  }
  repository(owner: $owner, name: $repo) {
    nameWithOwner
  }
}
"""

PULL_REQUESTS_PAGE = """
query GetPullRequests($owner: String!, $repo: String!, $cursor: String) {
  repository(owner: $owner, name: $repo) {
    nameWithOwner
    pullRequests(first: 100, after: $cursor, orderBy: {field: CREATED_AT, direction: DESC}) {
      pageInfo {
        hasNextPage
        endCursor
      }
      nodes {
        number
        createdAt
        author { login }
        reviews(first: 100) {
          nodes {
            state
            author { login }
          }
        }
      }
    }
  }
}
"""

PULL_REQUESTS_PATH = ["repository", "pullRequests"]
