"""GraphQL documents sent to the GitHub API."""

RECENT_OPEN_ISSUES_QUERY = """
query ($owner: String!, $name: String!, $assignee: String!, $since: DateTime, $first: Int!) {
    repository(owner: $owner, name: $name) {
        issues(
            first: $first
            filterBy: { since: $since, assignee: $assignee, states: [OPEN] }
            orderBy: { field: UPDATED_AT, direction: ASC }
        ) {
            nodes {
                id
                title
                updatedAt
            }
        }
    }
}
"""
"""Open issues assigned to a user, oldest update first. The since filter includes the boundary."""

FIND_PROJECTS_QUERY = """
query ($org: String!, $q: String!, $first: Int!) {
    organization(login: $org) {
        projectsV2(first: $first, query: $q) {
            nodes {
                id
                title
                number
            }
        }
    }
}
"""
"""Projects (v2) in an organization matching a free-text query."""

ADD_PROJECT_ITEM_MUTATION = """
mutation ($projectId: ID!, $contentId: ID!) {
    addProjectV2ItemById(input: { projectId: $projectId, contentId: $contentId }) {
        item {
            id
        }
    }
}
"""
"""Adds an issue to a project. Adding an issue that is already on the board returns the existing item."""
