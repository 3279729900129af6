"""The mapping of GitHub issue labels to team members for assignment."""

from types import MappingProxyType
from typing import Mapping, Optional


def _freeze(table: dict) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({label: MappingProxyType(dict(roles)) for label, roles in table.items()})


# label name -> {job role -> GitHub login}; roles are descriptive only
TEAM_ASSIGNMENTS: Mapping[str, Mapping[str, str]] = _freeze({
    "miniflare": {"owner": "petebacondarwin", "other": "petexxxbacondarwin"},
})


def get_team(
    label_name: str,
    table: Mapping[str, Mapping[str, str]] = TEAM_ASSIGNMENTS,
) -> Optional[Mapping[str, str]]:
    """Return the role mapping configured for a label, or None if the label is not mapped."""
    return table.get(label_name)
