"""Normalizer de listas exportadas (followers/following/pending/blocked/unfollowed).

Responsabilidades:
- Classificar o formato da entrada (array de strings, array de registros
  de export, texto colado)
- Extrair UserRecord com o extrator da variante
- Deduplicar por username

Cada variante tem seu próprio extrator, mantendo SRP.
"""

from .classifier import ClassifiedInput, ListShape, classify
from .extractor import (
    extract_export_record,
    extract_export_records,
    extract_free_text,
    extract_plain_strings,
)
from .normalizer import dedupe_records, normalize, normalize_input, normalize_inputs

__all__ = [
    "ClassifiedInput",
    "ListShape",
    "classify",
    "dedupe_records",
    "extract_export_record",
    "extract_export_records",
    "extract_free_text",
    "extract_plain_strings",
    "normalize",
    "normalize_input",
    "normalize_inputs",
]
