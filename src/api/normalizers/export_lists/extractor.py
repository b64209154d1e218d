"""Extratores de UserRecord: um por variante de ListShape.

Cada extrator recebe o conteúdo já classificado e devolve registros na
ordem da fonte. Elementos fora do formato são ignorados individualmente;
um registro malformado nunca descarta o restante da lista.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from app.domain.user_record import UserRecord, is_epoch_timestamp

if TYPE_CHECKING:
    from collections.abc import Iterable

_LINE_SPLIT = re.compile(r"\r\n|\r|\n")


def extract_plain_strings(items: Iterable[Any]) -> list[UserRecord]:
    """Cada string é um username, sem URL nem timestamp.

    Strings são mantidas como vieram; só as vazias (ou só espaços) caem.
    """
    records: list[UserRecord] = []
    for item in items:
        if isinstance(item, str) and item.strip():
            records.append(UserRecord(username=item))
    return records


def extract_export_records(items: Iterable[Any]) -> list[UserRecord]:
    """Extrai registros no formato de export do Instagram.

    Formato esperado por elemento:
        {"title": "...", "string_list_data": [{"value", "href", "timestamp"}]}

    O username vem de string_list_data[0].value; exports mais novos omitem
    value e trazem o username em title.
    """
    records: list[UserRecord] = []
    for item in items:
        record = extract_export_record(item)
        if record is not None:
            records.append(record)
    return records


def extract_export_record(item: Any) -> UserRecord | None:
    """Converte um elemento de export, ou None se fora do formato."""
    if not isinstance(item, dict):
        return None
    string_list_data = item.get("string_list_data")
    if not isinstance(string_list_data, list) or not string_list_data:
        return None
    entry = string_list_data[0]
    if not isinstance(entry, dict):
        return None

    username = _clean_str(entry.get("value")) or _clean_str(item.get("title"))
    if not username:
        return None

    href = entry.get("href")
    timestamp = entry.get("timestamp")
    return UserRecord(
        username=username,
        profile_url=href if isinstance(href, str) and href else None,
        captured_at=timestamp if is_epoch_timestamp(timestamp) else None,
    )


def extract_free_text(text: str) -> list[UserRecord]:
    """Uma linha por usuário; só o primeiro token da linha é o username.

    Tolera colagens com nome de exibição ou bio após o username.
    """
    records: list[UserRecord] = []
    for line in _LINE_SPLIT.split(text):
        tokens = line.split()
        if tokens:
            records.append(UserRecord(username=tokens[0]))
    return records


def _clean_str(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()
