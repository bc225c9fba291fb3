from __future__ import annotations

from collections.abc import Iterable

from app.schemas.normalized import DIFFICULTY_RANK, PriorityAction

from .actions import ACTION_TABLE
from .catalog import format_minutes
from .evaluator import Finding


def _sort_key(action: PriorityAction) -> tuple[int, int, str]:
    return (-action.impact_score, DIFFICULTY_RANK[action.difficulty], action.id)


def rank_priority_actions(
    findings: Iterable[Finding],
    *,
    max_actions: int | None = None,
) -> tuple[PriorityAction, ...]:
    """Cluster findings by their catalog action and rank the resulting actions.

    Highest recovered score first; on ties the easier action wins, then the action id.
    ``max_actions`` keeps only the top of the ranking and must be at least 1.
    """
    if max_actions is not None and max_actions < 1:
        raise ValueError(f"max_actions must be a positive integer, got {max_actions!r}")

    clusters: dict[str, list[Finding]] = {}
    for finding in findings:
        clusters.setdefault(finding.check.action, []).append(finding)

    actions: list[PriorityAction] = []
    for action_id, members in clusters.items():
        template = ACTION_TABLE[action_id]
        actions.append(
            PriorityAction(
                id=action_id,
                title=template.render_title(len(members)),
                description=template.description,
                difficulty=template.difficulty,
                estimated_time=format_minutes(sum(member.check.minutes for member in members)),
                impact_score=sum(member.field.impact_on_score for member in members),
            )
        )

    actions.sort(key=_sort_key)
    if max_actions is not None:
        actions = actions[:max_actions]
    return tuple(actions)
