"""
Label-triggered issue assignment.

When an issue is labeled, the team configured for that label in
``TEAM_ASSIGNMENTS`` is added to the issue's assignees. Logins already on
the issue are skipped, and logins GitHub refuses to assign are reported as a
warning rather than a failure.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Set, Union

from auto_assign.config import Settings, require_input
from auto_assign.config import settings as default_settings
from auto_assign.core.action_context import ActionContext
from auto_assign.core.team_assignments import TEAM_ASSIGNMENTS, get_team
from auto_assign.models.core import AssignmentOutcome, AssignmentResult, RepositoryRef
from auto_assign.services.github import GitHubService
from auto_assign.webhooks.issue_event_parser import parse_labeled_event


logger = logging.getLogger(__name__)

BANNER = "Auto Assign Issues\n=================="


def format_list(items: Iterable[str]) -> str:
    """Join items as an English conjunction list: 'a', 'a and b', 'a, b, and c'."""
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def compute_candidates(team: Mapping[str, str], current_assignees: Iterable[str]) -> Set[str]:
    """Return the team's logins that are not yet assigned to the issue."""
    return set(team.values()) - set(current_assignees)


class IssueAutoAssigner:
    """Assigns configured team members to issues when they are labeled."""

    def __init__(
        self,
        github_service: GitHubService,
        team_assignments: Mapping[str, Mapping[str, str]] = TEAM_ASSIGNMENTS,
    ):
        self.github_service = github_service
        self.team_assignments = team_assignments

    async def process_event(
        self,
        payload: Any,
        repository: Union[RepositoryRef, Callable[[], RepositoryRef]],
    ) -> AssignmentResult:
        """
        Assign the labeled issue to the team configured for the label.

        Args:
            payload: Webhook payload of the triggering event
            repository: Repository of the issue, or a callable resolving it;
                only resolved when an assignment request is made

        Returns:
            AssignmentResult describing what was done
        """
        validation = parse_labeled_event(payload)
        if not validation.is_valid:
            logger.debug(f"Ignoring event: {validation.reason}")
            return AssignmentResult(outcome=AssignmentOutcome.IGNORED)

        event = validation.event
        issue_number = event.issue.number
        label_name = event.label.name

        logger.info(f"Processing new label: {label_name} for issue #{issue_number}")

        team = get_team(label_name, self.team_assignments)
        if team is None:
            logger.info(f"No team assignment found for label: {label_name}")
            return AssignmentResult(
                outcome=AssignmentOutcome.UNMAPPED_LABEL,
                issue_number=issue_number,
                label=label_name,
            )

        candidates = compute_candidates(team, event.issue.assignee_logins)
        if not candidates:
            logger.info(
                f"All potential assignees are already assigned to issue #{issue_number}. "
                "Skipping auto-assignment."
            )
            return AssignmentResult(
                outcome=AssignmentOutcome.ALREADY_ASSIGNED,
                issue_number=issue_number,
                label=label_name,
            )

        requested = sorted(candidates)
        logger.info(f"Assigning issue #{issue_number} to: {format_list(requested)}")

        repo = repository() if callable(repository) else repository
        assigned = set(await self.github_service.add_assignees(repo, issue_number, requested))

        confirmed = sorted(candidates & assigned)
        missing = sorted(candidates - assigned)

        if missing:
            logger.warning(
                f"Not all assignees were added to issue #{issue_number}.\n"
                "They may not be collaborators on the repository.\n"
                f"Missing assignees: {format_list(missing)}"
            )

        if confirmed:
            logger.info(f"Successfully assigned issue #{issue_number} to {format_list(confirmed)}")
        else:
            logger.info(f"No assignees were added to issue #{issue_number}")

        return AssignmentResult(
            outcome=AssignmentOutcome.PARTIALLY_ASSIGNED if missing else AssignmentOutcome.ASSIGNED,
            issue_number=issue_number,
            label=label_name,
            requested=requested,
            confirmed=confirmed,
            missing=missing,
        )


async def run(
    context: ActionContext,
    settings: Optional[Settings] = None,
    github_service: Optional[GitHubService] = None,
) -> AssignmentResult:
    """Run the action once for the event in the given context."""
    settings = settings or default_settings
    logger.info(BANNER)

    token = require_input(settings, "github_token")
    service = github_service or GitHubService(token=token, base_url=settings.github_api_url)

    try:
        assigner = IssueAutoAssigner(service)
        return await assigner.process_event(context.payload, lambda: context.repo)
    finally:
        await service.close()
