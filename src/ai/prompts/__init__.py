"""Prompts do módulo AI.

Arquivos:
- insights_prompt.py: prompt do InsightsAgent

Parser: ai/utils/insights_parser.py
"""

from ai.prompts.insights_prompt import (
    INSIGHTS_AGENT_SYSTEM,
    INSIGHTS_AGENT_USER_TEMPLATE,
    format_insights_system_prompt,
    format_insights_user_prompt,
)

__all__ = [
    "INSIGHTS_AGENT_SYSTEM",
    "INSIGHTS_AGENT_USER_TEMPLATE",
    "format_insights_system_prompt",
    "format_insights_user_prompt",
]
