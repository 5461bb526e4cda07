"""GraphQL queries for the GitHub API.

Kept apart from the gateway so the query text is easy to read and maintain.
"""

# $query is reserved by `gh api graphql -f query=...` for the document itself,
# so the search string travels as $searchQuery.
SEARCH_ASSIGNED_PRS_QUERY = """query($searchQuery: String!, $first: Int!, $endCursor: String) {
  search(type: ISSUE, query: $searchQuery, first: $first, after: $endCursor) {
    nodes {
      ... on PullRequest {
        number
        title
        state
        isDraft
        updatedAt
        createdAt
        author { login }
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}"""

# Only the first page is consumed.
SEARCH_PAGE_SIZE = 100


def build_assigned_prs_search(owner: str, repo: str, login: str) -> str:
    """Build the search filter for open PRs in a repo assigned to a user."""
    return f"repo:{owner}/{repo} is:pr state:open assignee:{login} sort:created-desc"
