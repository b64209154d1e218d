"""Prompt do InsightsAgent.

Recebe amostras de usernames e contagens, devolve poucos insights curtos.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai.models.insights import InsightRequest

INSIGHTS_AGENT_SYSTEM = """You analyze a person's social-network relationship lists.

INPUT:
- counts: size of each derived list
- non_reciprocal_following: sample of accounts the person follows that do not follow back
- mutuals: sample of accounts that follow each other with the person

RULES:
- Base every insight only on the provided data. Never invent accounts or numbers.
- Do not judge or shame specific accounts.
- Keep each title under 60 characters and each content under 400 characters.
- Return at most {max_insights} insights.

OUTPUT (valid JSON only):
{{"insights": [{{"title": "...", "content": "..."}}]}}
"""

INSIGHTS_AGENT_USER_TEMPLATE = """## Counts (JSON)
{counts}

## Not following back (sample, {non_reciprocal_total} shown)
{non_reciprocal_following}

## Mutuals (sample, {mutuals_total} shown)
{mutuals}

Return JSON only."""


def format_insights_system_prompt(max_insights: int) -> str:
    """Formata prompt de sistema com o limite de insights."""
    return INSIGHTS_AGENT_SYSTEM.format(max_insights=max_insights)


def format_insights_user_prompt(request: InsightRequest) -> str:
    """Formata prompt do usuário a partir da amostra."""
    return INSIGHTS_AGENT_USER_TEMPLATE.format(
        counts=json.dumps(request.counts, sort_keys=True),
        non_reciprocal_total=len(request.non_reciprocal_following),
        non_reciprocal_following=_format_usernames(request.non_reciprocal_following),
        mutuals_total=len(request.mutuals),
        mutuals=_format_usernames(request.mutuals),
    )


def _format_usernames(usernames: tuple[str, ...]) -> str:
    if not usernames:
        return "(empty)"
    return "\n".join(f"- {username}" for username in usernames)
