"""Models para o resumo de insights (LLM opcional).

Define contratos de entrada/saída do InsightsAgent: recebe amostras de
usernames e contagens, devolve uma lista curta de {title, content}.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TITLE_LENGTH = 80
MAX_CONTENT_LENGTH = 600


@dataclass(frozen=True, slots=True)
class InsightRequest:
    """Input do InsightsAgent.

    Atributos:
        non_reciprocal_following: Amostra de quem não segue de volta
        mutuals: Amostra de seguidores mútuos
        counts: Tamanho de cada conjunto derivado
    """

    non_reciprocal_following: tuple[str, ...] = ()
    mutuals: tuple[str, ...] = ()
    counts: dict[str, int] = field(default_factory=dict)


class InsightEntry(BaseModel):
    """Um insight retornado pela LLM."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)

    @field_validator("title", "content", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        """Remove espaços nas bordas antes de validar tamanho."""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("title")
    @classmethod
    def truncate_title(cls, value: str) -> str:
        if len(value) > MAX_TITLE_LENGTH:
            return value[: MAX_TITLE_LENGTH - 3] + "..."
        return value

    @field_validator("content")
    @classmethod
    def truncate_content(cls, value: str) -> str:
        if len(value) > MAX_CONTENT_LENGTH:
            return value[: MAX_CONTENT_LENGTH - 3] + "..."
        return value


@dataclass(frozen=True, slots=True)
class InsightSummary:
    """Resultado do InsightsAgent.

    Atributos:
        entries: Insights válidos (pode ser vazio)
        fallback_used: True quando a LLM não respondeu de forma utilizável
        reason: Motivo do fallback (sem PII)
    """

    entries: tuple[InsightEntry, ...] = ()
    fallback_used: bool = False
    reason: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "insights": [entry.model_dump() for entry in self.entries],
            "fallback_used": self.fallback_used,
            "reason": self.reason,
        }
