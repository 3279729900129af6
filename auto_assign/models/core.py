"""
Core Pydantic models for Auto Assign Issues.

This module contains the data models for the subset of the GitHub
``issues`` webhook payload the action reads, the repository the action runs
against, and the outcome of an assignment run.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class AssignmentOutcome(str, Enum):
    """Enumeration of possible assignment run outcomes."""

    IGNORED = "ignored"
    UNMAPPED_LABEL = "unmapped_label"
    ALREADY_ASSIGNED = "already_assigned"
    ASSIGNED = "assigned"
    PARTIALLY_ASSIGNED = "partially_assigned"


class Assignee(BaseModel):
    """Model representing a GitHub account attached to an issue."""

    login: Optional[str] = Field(default=None, description="GitHub login of the account")


class Label(BaseModel):
    """Model representing a GitHub issue label."""

    name: str = Field(..., description="Label name")


class Issue(BaseModel):
    """Model representing the issue carried by a webhook payload."""

    number: int = Field(..., description="Issue number within the repository")
    assignees: List[Assignee] = Field(default_factory=list, description="Current assignees")

    @field_validator("assignees", mode="before")
    @classmethod
    def validate_assignees(cls, v):
        """A missing or null assignee list means nobody is assigned; null entries are dropped."""
        return [assignee for assignee in (v or []) if assignee is not None]

    @property
    def assignee_logins(self) -> List[str]:
        return [assignee.login for assignee in self.assignees if assignee.login]


class IssuesLabeledEvent(BaseModel):
    """Model representing an ``issues`` event with the ``labeled`` action."""

    action: Literal["labeled"]
    issue: Issue
    label: Label


class RepositoryRef(BaseModel):
    """Owner and name of a GitHub repository."""

    owner: str = Field(..., description="Repository owner (user or organization)")
    repo: str = Field(..., description="Repository name")

    @classmethod
    def from_full_name(cls, full_name: str) -> "RepositoryRef":
        """Build a reference from an ``owner/repo`` string."""
        owner, _, repo = full_name.partition("/")
        if not owner or not repo or "/" in repo:
            raise ValueError(f'Repository must be in format "owner/repo", got "{full_name}"')
        return cls(owner=owner, repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class AssignmentResult(BaseModel):
    """Model representing the outcome of one assignment run."""

    outcome: AssignmentOutcome = Field(..., description="What the run did")
    issue_number: Optional[int] = Field(default=None, description="Issue that was processed")
    label: Optional[str] = Field(default=None, description="Label that triggered the run")
    requested: List[str] = Field(default_factory=list, description="Logins sent to GitHub")
    confirmed: List[str] = Field(default_factory=list, description="Requested logins GitHub assigned")
    missing: List[str] = Field(default_factory=list, description="Requested logins GitHub did not assign")
