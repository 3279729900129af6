"""
Issue Event Parser

Narrows an untyped webhook payload into an ``IssuesLabeledEvent`` before the
assigner touches it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from auto_assign.models.core import IssuesLabeledEvent


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventValidation:
    """Result of validating a payload: either a parsed event or a rejection reason."""

    event: Optional[IssuesLabeledEvent] = None
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.event is not None

    @classmethod
    def accepted(cls, event: IssuesLabeledEvent) -> "EventValidation":
        return cls(event=event)

    @classmethod
    def rejected(cls, reason: str) -> "EventValidation":
        return cls(reason=reason)


def parse_labeled_event(payload: Any) -> EventValidation:
    """
    Check whether a payload is an issue ``labeled`` event.

    Args:
        payload: Webhook payload as decoded from the event file

    Returns:
        An accepted EventValidation carrying the parsed event, or a rejected
        one carrying the reason
    """
    if not payload or not isinstance(payload, Mapping):
        return EventValidation.rejected("payload is empty or not an object")

    action = payload.get("action")
    if action != "labeled":
        return EventValidation.rejected(f"action is {action!r}, not 'labeled'")

    if not payload.get("issue"):
        return EventValidation.rejected("payload has no issue")

    if not payload.get("label"):
        return EventValidation.rejected("payload has no label")

    try:
        event = IssuesLabeledEvent.model_validate(dict(payload))
    except ValidationError as e:
        logger.debug(f"Labeled payload failed validation: {e}")
        return EventValidation.rejected(f"payload does not match the issues labeled shape: {e.error_count()} error(s)")

    return EventValidation.accepted(event)
