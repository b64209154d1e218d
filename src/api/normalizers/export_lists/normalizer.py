"""Normalizer de listas exportadas: texto bruto para UserRecord.

Fluxo: classify → extrator da variante → deduplicação por username.

Política de duplicados: a última ocorrência na ordem da fonte define os
metadados do registro; a posição é a da primeira ocorrência.

Nunca levanta exceção para entrada malformada; o pior caso é lista vazia.
Logs só carregam contagens (usernames são PII).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.export_lists.classifier import ListShape, classify
from api.normalizers.export_lists.extractor import (
    extract_export_records,
    extract_free_text,
    extract_plain_strings,
)
from app.domain.user_record import ListCategory, NormalizedList, RawInput, UserRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def normalize(raw_text: str | None) -> list[UserRecord]:
    """Normaliza um texto bruto em sequência de UserRecord."""
    classified = classify(raw_text)

    if classified.shape is ListShape.PLAIN_STRINGS:
        extracted = extract_plain_strings(classified.items)
        source_count = len(classified.items)
    elif classified.shape is ListShape.EXPORT_RECORDS:
        extracted = extract_export_records(classified.items)
        source_count = len(classified.items)
    elif classified.shape is ListShape.FREE_TEXT:
        extracted = extract_free_text(classified.text)
        source_count = len(extracted)
    else:
        extracted = []
        source_count = 0

    records = dedupe_records(extracted)
    logger.debug(
        "list_normalized",
        extra={
            "shape": classified.shape.value,
            "source_count": source_count,
            "skipped_count": source_count - len(extracted),
            "duplicate_count": len(extracted) - len(records),
            "record_count": len(records),
        },
    )
    return records


def dedupe_records(records: Iterable[UserRecord]) -> list[UserRecord]:
    """Garante usernames únicos (última ocorrência vence, posição da primeira)."""
    by_username: dict[str, UserRecord] = {}
    for record in records:
        by_username[record.username] = record
    return list(by_username.values())


def normalize_input(raw: RawInput) -> NormalizedList:
    """Normaliza um RawInput mantendo a categoria."""
    return NormalizedList(category=raw.category, records=tuple(normalize(raw.text)))


def normalize_inputs(raws: Iterable[RawInput]) -> dict[ListCategory, NormalizedList]:
    """Normaliza várias categorias de forma independente.

    Raises:
        ValueError: Se a mesma categoria aparecer mais de uma vez.
    """
    normalized: dict[ListCategory, NormalizedList] = {}
    for raw in raws:
        if raw.category in normalized:
            raise ValueError(f"Categoria duplicada: {raw.category.value}")
        normalized[raw.category] = normalize_input(raw)
    return normalized
