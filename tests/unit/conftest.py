"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog

from project_issue_sync.schemas.sync import IssueModel

from .utils import make_issue

CONFIGURATION_ENV_NAMES = [
    "DEBUG",
    "GITHUB_API_URL",
    "GITHUB_AUTH_TOKEN",
    "GIST_ID",
    "PROJECT_ORG",
    "PROJECT_NAME",
    "ISSUES_ASSIGNEE",
    "ISSUES_ORG",
    "ISSUES_PROJECT",
]


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Remove configuration environment variables and run from a directory without a .env file."""
    for name in CONFIGURATION_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("no-dotenv"))


@pytest.fixture
def three_issues() -> list[IssueModel]:
    """Three issues with strictly increasing update timestamps."""
    return [
        make_issue("I_1", "First issue", "2024-01-01T10:00:00Z"),
        make_issue("I_2", "Second issue", "2024-01-02T10:00:00Z"),
        make_issue("I_3", "Third issue", "2024-01-03T10:00:00Z"),
    ]
