"""Helper para chamadas HTTP à API OpenAI (Chat Completions).

Implementação concreta de IO; pertence a app/infra.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from config.settings.ai import InsightsSettings

logger = logging.getLogger(__name__)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"

_MAX_LOGGED_BODY = 1000


async def call_openai_api(
    *,
    http_client: httpx.AsyncClient,
    api_key: str,
    settings: InsightsSettings,
    system_prompt: str,
    user_prompt: str,
    point_name: str,
    json_response: bool = True,
) -> str | None:
    """Executa chamada à API OpenAI.

    Args:
        http_client: Cliente HTTP async
        api_key: API key da OpenAI
        settings: Configurações de insights (modelo, limite de tokens, timeout)
        system_prompt: Prompt de sistema
        user_prompt: Prompt do usuário
        point_name: Nome do ponto LLM (para logs)
        json_response: Pede resposta em JSON (response_format=json_object)

    Returns:
        Conteúdo da resposta ou None em caso de erro
    """
    if not api_key:
        logger.error("openai_api_key_missing", extra={"point": point_name})
        return None

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    payload: dict[str, Any] = {
        "model": settings.model,
        "max_completion_tokens": settings.max_tokens,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
    }
    if json_response:
        payload["response_format"] = {"type": "json_object"}

    try:
        response = await http_client.post(
            OPENAI_API_URL,
            headers=headers,
            json=payload,
            timeout=settings.timeout_seconds,
        )
        response.raise_for_status()
        data = response.json()

        choices = data.get("choices") or [{}]
        content = choices[0].get("message", {}).get("content")
        if content:
            logger.debug(
                "openai_call_success",
                extra={
                    "point": point_name,
                    "model": settings.model,
                    "tokens_used": data.get("usage", {}).get("total_tokens"),
                },
            )
            return content

        logger.warning("openai_empty_response", extra={"point": point_name})
        return None

    except httpx.TimeoutException:
        logger.warning(
            "openai_timeout",
            extra={"point": point_name, "timeout": settings.timeout_seconds},
        )
        return None

    except httpx.HTTPStatusError as e:
        logger.warning(
            "openai_http_error",
            extra={
                "point": point_name,
                "status_code": e.response.status_code,
                "error": _error_message(e.response),
            },
        )
        return None

    except Exception as e:
        logger.error(
            "openai_unexpected_error",
            extra={"point": point_name, "error_type": type(e).__name__},
        )
        return None


def _error_message(response: httpx.Response) -> str:
    """Extrai mensagem de erro da OpenAI quando disponível (seguro para log)."""
    try:
        message = response.json().get("error", {}).get("message")
    except Exception:
        message = None
    if isinstance(message, str) and message:
        return message
    body = response.text
    if len(body) > _MAX_LOGGED_BODY:
        return body[:_MAX_LOGGED_BODY] + "..."
    return body
