"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GraphQLFailed

from project_issue_sync.schemas.sync import IssueModel, ProjectModel

from .abc import GistBackendBase, IssueSourceBase, ProjectBoardBase
from .client import GitHubClient, get_github_client
from .queries import ADD_PROJECT_ITEM_MUTATION, FIND_PROJECTS_QUERY, RECENT_OPEN_ISSUES_QUERY

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def log_graphql_failures(func: F) -> F:
    """Decorator to log GitHub GraphQL errors with context before re-raising them unchanged."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GraphQLFailed as exc:
            errors = getattr(exc.response, "errors", None) or []
            logger.error(
                "GitHub GraphQL request failed",
                function=func.__name__,
                errors=[getattr(error, "message", str(error)) for error in errors],
            )
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(IssueSourceBase, ProjectBoardBase, GistBackendBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_auth_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_auth_token: Token with read access to issues, write access to projects and gists
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_client(github_auth_token=github_auth_token, github_api_url=github_api_url)
        return cls(client)

    # Issues
    @log_graphql_failures
    async def list_open_issues_since(
        self,
        owner: str,
        name: str,
        assignee: str,
        since: str | None = None,
        first: int = 100,
    ) -> list[IssueModel]:
        """List open issues assigned to a user that were updated at or after `since`, oldest first."""
        data: dict[str, Any] = await self.client.async_graphql(
            RECENT_OPEN_ISSUES_QUERY,
            variables={"owner": owner, "name": name, "assignee": assignee, "since": since, "first": first},
        )
        nodes = data["repository"]["issues"]["nodes"]
        logger.debug("Fetched open issues", owner=owner, name=name, since=since, count=len(nodes))
        return [IssueModel.model_validate(node) for node in nodes]

    # Projects
    @log_graphql_failures
    async def find_projects(self, org: str, query: str, first: int = 10) -> list[ProjectModel]:
        """Find projects in an organization whose name matches the query."""
        data: dict[str, Any] = await self.client.async_graphql(
            FIND_PROJECTS_QUERY,
            variables={"org": org, "q": query, "first": first},
        )
        nodes = data["organization"]["projectsV2"]["nodes"]
        return [ProjectModel.model_validate(node) for node in nodes]

    @log_graphql_failures
    async def add_issue_to_project(self, project_id: str, content_id: str) -> str:
        """Add an issue to a project. Re-adding an issue already on the board is a no-op."""
        data: dict[str, Any] = await self.client.async_graphql(
            ADD_PROJECT_ITEM_MUTATION,
            variables={"projectId": project_id, "contentId": content_id},
        )
        return data["addProjectV2ItemById"]["item"]["id"]

    # Gists
    async def get_gist_file_content(self, gist_id: str, file_name: str) -> str | None:
        """Get the content of a file in a gist.

        Returns None when the gist has no file with the given name. GitHub
        truncates large file contents in the gist response, in which case the
        full content is read from the file's raw URL.
        """
        response: Response[Any] = await self.client.rest.gists.async_get(gist_id=gist_id)
        files: dict[str, Any] = response.json().get("files") or {}
        gist_file = files.get(file_name)
        if gist_file is None:
            logger.info("Gist file not found", gist_id=gist_id, file_name=file_name)
            return None
        if gist_file.get("truncated"):
            logger.info("Gist file content is truncated, reading raw content", gist_id=gist_id, file_name=file_name)
            raw_response: Response[Any] = await self.client.arequest("GET", gist_file["raw_url"])
            return raw_response.text
        return gist_file.get("content") or ""

    async def update_gist_file(self, gist_id: str, file_name: str, content: str, description: str) -> None:
        """Overwrite a file in a gist and set the gist description."""
        await self.client.rest.gists.async_update(
            gist_id=gist_id,
            description=description,
            files={file_name: {"content": content}},
        )
        logger.info("Updated gist file", gist_id=gist_id, file_name=file_name)
