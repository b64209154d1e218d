"""Modelos/DTOs para IA."""

from ai.models.insights import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    InsightEntry,
    InsightRequest,
    InsightSummary,
)

__all__ = [
    "MAX_CONTENT_LENGTH",
    "MAX_TITLE_LENGTH",
    "InsightEntry",
    "InsightRequest",
    "InsightSummary",
]
