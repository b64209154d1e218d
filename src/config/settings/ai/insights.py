"""Settings do resumo de insights.

Reúne a conexão com a API OpenAI e os limites do resumo: o cliente de
insights é o único consumidor da LLM.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class InsightsSettings:
    """Configurações do InsightsAgent.

    Attributes:
        enabled: Se o resumo via OpenAI está habilitado
        api_key: Chave da API OpenAI
        model: Modelo chat completions
        timeout_seconds: Timeout por chamada
        max_tokens: Limite de tokens da resposta
        sample_limit: Máximo de usernames enviados por lista
        max_entries: Máximo de insights mantidos na resposta
    """

    enabled: bool = True
    api_key: str = ""
    model: str = "gpt-4o-mini"
    timeout_seconds: float = 30.0
    max_tokens: int = 800
    sample_limit: int = 50
    max_entries: int = 3

    def validate(self) -> list[str]:
        """Valida configurações de insights."""
        errors: list[str] = []

        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY não configurado mas OPENAI_ENABLED=true")

        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")

        if self.max_tokens <= 0:
            errors.append("OPENAI_MAX_TOKENS deve ser > 0")

        if self.sample_limit < 0:
            errors.append("INSIGHTS_SAMPLE_LIMIT deve ser >= 0")

        if self.max_entries <= 0:
            errors.append("INSIGHTS_MAX_ENTRIES deve ser > 0")

        return errors


def _load_insights_from_env() -> InsightsSettings:
    """Carrega InsightsSettings de variáveis de ambiente."""
    return InsightsSettings(
        enabled=os.getenv("OPENAI_ENABLED", "true").lower() in ("true", "1", "yes"),
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "800")),
        sample_limit=int(os.getenv("INSIGHTS_SAMPLE_LIMIT", "50")),
        max_entries=int(os.getenv("INSIGHTS_MAX_ENTRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_insights_settings() -> InsightsSettings:
    """Retorna instância cacheada de InsightsSettings."""
    return _load_insights_from_env()
