"""Base ABCs for the remote collaborators of the sync loop."""

from abc import ABC, abstractmethod

from project_issue_sync.schemas.sync import IssueModel, ProjectModel


class IssueSourceBase(ABC):
    """Base ABC for a source of open issues."""

    @abstractmethod
    async def list_open_issues_since(
        self,
        owner: str,
        name: str,
        assignee: str,
        since: str | None = None,
        first: int = 100,
    ) -> list[IssueModel]:
        """List open issues assigned to a user, ascending by update time."""
        pass


class ProjectBoardBase(ABC):
    """Base ABC for a project board."""

    @abstractmethod
    async def find_projects(self, org: str, query: str, first: int = 10) -> list[ProjectModel]:
        """Find projects in an organization matching a query."""
        pass

    @abstractmethod
    async def add_issue_to_project(self, project_id: str, content_id: str) -> str:
        """Add an issue to a project and return the project item ID."""
        pass


class GistBackendBase(ABC):
    """Base ABC for gist-backed blob storage."""

    @abstractmethod
    async def get_gist_file_content(self, gist_id: str, file_name: str) -> str | None:
        """Get the content of a file in a gist, or None if the file is absent."""
        pass

    @abstractmethod
    async def update_gist_file(self, gist_id: str, file_name: str, content: str, description: str) -> None:
        """Overwrite a file in a gist."""
        pass
