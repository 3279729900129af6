"""Workflow run context: the triggering event and the repository it belongs to."""

import json
import logging
import os
from typing import Any, Dict, Optional

from auto_assign.config import Settings
from auto_assign.core.exceptions import ConfigurationError
from auto_assign.models.core import RepositoryRef


logger = logging.getLogger(__name__)


class ActionContext:
    """Event name, payload and repository of the workflow run."""

    def __init__(
        self,
        payload: Optional[Dict[str, Any]] = None,
        event_name: Optional[str] = None,
        repository: Optional[str] = None,
    ):
        self.payload = payload or {}
        self.event_name = event_name
        self._repository = repository
        self._repo: Optional[RepositoryRef] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ActionContext":
        """Load the context from the runner environment."""
        payload: Dict[str, Any] = {}
        event_path = settings.github_event_path

        if event_path:
            if os.path.exists(event_path):
                with open(event_path, encoding="utf-8") as f:
                    payload = json.load(f)
            else:
                logger.warning(f"GITHUB_EVENT_PATH {event_path} does not exist")

        logger.debug(f"Loaded {settings.github_event_name or 'unknown'} event payload")

        return cls(
            payload=payload,
            event_name=settings.github_event_name,
            repository=settings.github_repository,
        )

    @property
    def repo(self) -> RepositoryRef:
        """
        The repository the workflow runs in.

        Taken from GITHUB_REPOSITORY, falling back to the payload's
        ``repository`` object. Resolved on first access.
        """
        if self._repo is None:
            self._repo = self._resolve_repo()
        return self._repo

    def _resolve_repo(self) -> RepositoryRef:
        if self._repository:
            try:
                return RepositoryRef.from_full_name(self._repository)
            except ValueError as e:
                raise ConfigurationError(str(e), setting_name="GITHUB_REPOSITORY")

        repository = self.payload.get("repository") or {}
        owner = (repository.get("owner") or {}).get("login")
        name = repository.get("name")
        if owner and name:
            return RepositoryRef(owner=owner, repo=name)

        raise ConfigurationError(
            "context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'",
            setting_name="GITHUB_REPOSITORY",
        )
