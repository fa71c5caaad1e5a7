"""Pydantic schemas for issues, projects and the persisted sync state."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class IssueModel(BaseModel):
    """Pydantic model for an open issue returned by the issue query.

    The timestamp is kept as the exact string returned by GitHub so that
    cursor comparisons never depend on datetime parsing or formatting.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    updated_at: str = Field(alias="updatedAt")


class ProjectModel(BaseModel):
    """Pydantic model for a GitHub Projects (v2) board."""

    id: str
    title: str
    number: int


class SyncStateModel(BaseModel):
    """Pydantic model for the state persisted between runs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: Literal["1"] = "1"
    last_synced_since: str | None = Field(default=None, alias="lastSyncedSince")
