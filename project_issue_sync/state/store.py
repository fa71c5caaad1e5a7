"""Gist-backed store for the state persisted between runs."""

from typing import Generic, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from project_issue_sync.github.abc import GistBackendBase
from project_issue_sync.state.exceptions import MalformedStateError
from project_issue_sync.utils.constants import STATE_DESCRIPTION, STATE_FILE_NAME

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

StateT = TypeVar("StateT", bound=BaseModel)


class StateStore(Generic[StateT]):
    """Reads and writes one named JSON file in a gist.

    Writes are full overwrites of the file. There is no locking, so only one
    writer may use a given gist at a time.
    """

    def __init__(
        self,
        backend: GistBackendBase,
        gist_id: str,
        model: type[StateT],
        file_name: str = STATE_FILE_NAME,
        description: str = STATE_DESCRIPTION,
    ) -> None:
        """Initialize the store for a gist and the model its file holds."""
        self.backend = backend
        self.gist_id = gist_id
        self.model = model
        self.file_name = file_name
        self.description = description

    async def load(self, default: StateT) -> StateT:
        """Load the stored state, or return `default` when nothing is stored yet."""
        content = await self.backend.get_gist_file_content(self.gist_id, self.file_name)
        if content is None:
            logger.info("No stored state found, using default", gist_id=self.gist_id, file_name=self.file_name)
            return default
        try:
            state = self.model.model_validate_json(content)
        except ValidationError as exc:
            logger.error("Stored state is malformed", gist_id=self.gist_id, file_name=self.file_name, error=str(exc))
            raise MalformedStateError(self.gist_id, self.file_name, str(exc)) from exc
        logger.info("Loaded stored state", gist_id=self.gist_id, file_name=self.file_name)
        return state

    async def save(self, state: StateT) -> None:
        """Overwrite the stored state."""
        content = state.model_dump_json(by_alias=True)
        await self.backend.update_gist_file(self.gist_id, self.file_name, content, self.description)
        logger.info("Saved state", gist_id=self.gist_id, file_name=self.file_name)
