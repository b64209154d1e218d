"""Extrator de JSON de respostas de LLM.

Extrai JSON de respostas brutas que podem conter markdown ou texto adicional.
"""

from __future__ import annotations

import json
from typing import Any


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Extrai e valida JSON de resposta de LLM.

    Trata casos comuns:
    - Resposta envolvida em markdown code blocks
    - Whitespace extra
    - JSON embutido em texto

    Args:
        response: Resposta bruta da LLM

    Returns:
        Dict extraído do JSON ou None se não encontrado
    """
    if not response or not isinstance(response, str):
        return None

    text = response.strip()

    # Remover markdown code blocks se presentes
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]

    if text.endswith("```"):
        text = text[:-3]

    text = text.strip()

    data = _loads_dict(text)
    if data is not None:
        return data

    # JSON embutido em texto: do primeiro "{" ao último "}"
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return _loads_dict(text[start : end + 1])


def _loads_dict(text: str) -> dict[str, Any] | None:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
