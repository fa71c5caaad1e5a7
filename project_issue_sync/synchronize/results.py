"""Contains results of application execution."""

from project_issue_sync.schemas.sync import IssueModel, ProjectModel


class IssueSynchronizationResult:
    """Contains results of the sync loop."""

    def __init__(self, starting_cursor: str | None, final_cursor: str | None, pushed_issues: list[IssueModel], pages_fetched: int) -> None:
        """Initialize the result with the cursors, the issues pushed and the number of pages fetched."""
        self.starting_cursor = starting_cursor
        self.final_cursor = final_cursor
        self.pushed_issues = pushed_issues
        self.pages_fetched = pages_fetched


class SyncWorkflowResult:
    """Contains results of the sync workflow."""

    def __init__(self, project: ProjectModel, issue_synchronization_result: IssueSynchronizationResult) -> None:
        """Initialize the result with the resolved project and the sync loop result."""
        self.project = project
        self.issue_synchronization_result = issue_synchronization_result
