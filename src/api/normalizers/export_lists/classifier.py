"""Classificação do formato de uma lista bruta.

Um único passo decide qual extrator usar, em vez de tentar parsers em
cascata. Formatos reconhecidos:

- PLAIN_STRINGS: array JSON onde todo elemento é string
- EXPORT_RECORDS: array JSON de registros de export (string_list_data)
- FREE_TEXT: texto que não é JSON (lista colada, um usuário por linha)
- UNRECOGNIZED: JSON válido sem lista utilizável

Exports do Instagram embrulham a lista num objeto
({"relationships_following": [...]}); esse envelope é removido aqui.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

_BOM = "\ufeff"
_WRAPPER_KEY_PREFIX = "relationships_"


class ListShape(Enum):
    """Variantes de entrada suportadas."""

    PLAIN_STRINGS = "plain_strings"
    EXPORT_RECORDS = "export_records"
    FREE_TEXT = "free_text"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class ClassifiedInput:
    """Resultado da classificação.

    Atributos:
        shape: Variante detectada
        items: Elementos do array JSON (PLAIN_STRINGS/EXPORT_RECORDS)
        text: Texto original sem BOM (FREE_TEXT)
    """

    shape: ListShape
    items: tuple[Any, ...] = ()
    text: str = ""


def classify(raw_text: str | None) -> ClassifiedInput:
    """Classifica texto bruto em uma das variantes de ListShape.

    Nunca levanta exceção: entrada vazia ou inesperada vira UNRECOGNIZED.
    """
    if not isinstance(raw_text, str):
        return ClassifiedInput(ListShape.UNRECOGNIZED)

    text = raw_text.lstrip(_BOM)
    if not text.strip():
        return ClassifiedInput(ListShape.UNRECOGNIZED)

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # ValueError cobre JSONDecodeError e o limite de dígitos de inteiros
        return ClassifiedInput(ListShape.FREE_TEXT, text=text)

    items = _unwrap_list(data)
    if items is None:
        return ClassifiedInput(ListShape.UNRECOGNIZED)

    if all(isinstance(item, str) for item in items):
        return ClassifiedInput(ListShape.PLAIN_STRINGS, items=tuple(items))
    return ClassifiedInput(ListShape.EXPORT_RECORDS, items=tuple(items))


def _unwrap_list(data: Any) -> list[Any] | None:
    """Retorna a lista de usuários contida em data, se houver."""
    if isinstance(data, list):
        return data
    if not isinstance(data, dict):
        return None

    wrapped = [
        value
        for key, value in data.items()
        if isinstance(key, str)
        and key.startswith(_WRAPPER_KEY_PREFIX)
        and isinstance(value, list)
    ]
    if len(wrapped) == 1:
        return wrapped[0]

    # Envelope desconhecido: aceita apenas se houver exatamente uma lista
    lists = [value for value in data.values() if isinstance(value, list)]
    if not wrapped and len(lists) == 1:
        return lists[0]
    return None
