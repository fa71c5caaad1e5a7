"""Custom exceptions for the synchronize module."""


class ProjectNotFoundError(Exception):
    """Raised when no project in an organization matches the requested name."""

    def __init__(self, org: str, name: str) -> None:
        super().__init__(f'Could not find project with name "{name}" in org "{org}"')
        self.org = org
        self.name = name
