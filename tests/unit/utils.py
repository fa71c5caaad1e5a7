"""In-memory stand-ins for the remote collaborators used by unit tests."""

from project_issue_sync.github.abc import GistBackendBase, IssueSourceBase, ProjectBoardBase
from project_issue_sync.schemas.sync import IssueModel, ProjectModel


def make_issue(issue_id: str, title: str, updated_at: str) -> IssueModel:
    """Build an issue the way the GraphQL response is parsed."""
    return IssueModel.model_validate({"id": issue_id, "title": title, "updatedAt": updated_at})


class ScriptedIssueSource(IssueSourceBase):
    """Returns pre-defined pages in order, then empty pages."""

    def __init__(self, pages: list[list[IssueModel]]) -> None:
        self.pages = list(pages)
        self.requests: list[dict[str, object]] = []

    async def list_open_issues_since(
        self,
        owner: str,
        name: str,
        assignee: str,
        since: str | None = None,
        first: int = 100,
    ) -> list[IssueModel]:
        self.requests.append({"owner": owner, "name": name, "assignee": assignee, "since": since, "first": first})
        if not self.pages:
            return []
        return self.pages.pop(0)


class InMemoryIssueSource(IssueSourceBase):
    """Filters a fixed set of issues with an inclusive `since` boundary, like GitHub does."""

    def __init__(self, issues: list[IssueModel]) -> None:
        self.issues = sorted(issues, key=lambda issue: issue.updated_at)
        self.requests: list[str | None] = []

    async def list_open_issues_since(
        self,
        owner: str,
        name: str,
        assignee: str,
        since: str | None = None,
        first: int = 100,
    ) -> list[IssueModel]:
        self.requests.append(since)
        matching = [issue for issue in self.issues if since is None or issue.updated_at >= since]
        return matching[:first]


class RecordingProjectBoard(ProjectBoardBase):
    """Records every item added and returns configured project candidates."""

    def __init__(self, projects: list[ProjectModel] | None = None, fail_on_content_id: str | None = None) -> None:
        self.projects = projects or []
        self.fail_on_content_id = fail_on_content_id
        self.lookups: list[tuple[str, str, int]] = []
        self.added: list[tuple[str, str]] = []

    async def find_projects(self, org: str, query: str, first: int = 10) -> list[ProjectModel]:
        self.lookups.append((org, query, first))
        return self.projects[:first]

    async def add_issue_to_project(self, project_id: str, content_id: str) -> str:
        if content_id == self.fail_on_content_id:
            raise RuntimeError(f"Failed to add {content_id}")
        self.added.append((project_id, content_id))
        return f"PVTI_{content_id}"


class InMemoryGistBackend(GistBackendBase):
    """Keeps gist files in a dictionary."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.descriptions: list[str] = []
        self.writes = 0

    async def get_gist_file_content(self, gist_id: str, file_name: str) -> str | None:
        return self.files.get(file_name)

    async def update_gist_file(self, gist_id: str, file_name: str, content: str, description: str) -> None:
        self.files[file_name] = content
        self.descriptions.append(description)
        self.writes += 1


class FakeGitHubAdapter(InMemoryIssueSource, RecordingProjectBoard, InMemoryGistBackend):
    """Combines all collaborators the way GitHubKitAdapter does."""

    def __init__(
        self,
        issues: list[IssueModel],
        projects: list[ProjectModel],
        files: dict[str, str] | None = None,
        fail_on_content_id: str | None = None,
    ) -> None:
        InMemoryIssueSource.__init__(self, issues)
        RecordingProjectBoard.__init__(self, projects, fail_on_content_id)
        InMemoryGistBackend.__init__(self, files)
