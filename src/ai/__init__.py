"""Módulo AI do follow-insights.

InsightsAgent opcional: recebe amostras de usernames e contagens da
análise e devolve poucos insights {title, content}.

ai/ não faz IO: o cliente HTTP fica em app/infra/ai.
"""

from ai.models import InsightEntry, InsightRequest, InsightSummary
from ai.rules import fallback_insights

__all__ = [
    "InsightEntry",
    "InsightRequest",
    "InsightSummary",
    "fallback_insights",
]
