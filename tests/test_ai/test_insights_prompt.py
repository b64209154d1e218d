"""Testes dos prompts e fallbacks do InsightsAgent."""

from __future__ import annotations

from ai.models.insights import InsightRequest
from ai.prompts import format_insights_system_prompt, format_insights_user_prompt
from ai.rules import fallback_insights


class TestInsightsPrompts:
    """Formatação dos prompts."""

    def test_system_prompt_limit(self) -> None:
        prompt = format_insights_system_prompt(3)
        assert "at most 3 insights" in prompt
        assert '{"insights": [{"title": "...", "content": "..."}]}' in prompt

    def test_user_prompt_lists_sample(self) -> None:
        prompt = format_insights_user_prompt(
            InsightRequest(
                non_reciprocal_following=("d", "e"),
                mutuals=(),
                counts={"mutuals": 0, "non_reciprocal_following": 2},
            )
        )
        assert "- d\n- e" in prompt
        assert "(empty)" in prompt
        assert '{"mutuals": 0, "non_reciprocal_following": 2}' in prompt


class TestFallbackInsights:
    """fallback_insights."""

    def test_default_reason(self) -> None:
        summary = fallback_insights()
        assert summary.fallback_used
        assert summary.entries == ()
        assert summary.reason == "llm_unavailable"

    def test_custom_reason(self) -> None:
        assert fallback_insights("timeout").reason == "timeout"
