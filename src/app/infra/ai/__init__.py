"""Implementações concretas de IO para IA.

app/infra faz IO; ai/ só define modelos, prompts, parsers e fallbacks.
"""

from app.infra.ai.openai_insights_client import OpenAIInsightsClient

__all__ = [
    "OpenAIInsightsClient",
]
