"""Utilitários do módulo AI (extração e parsing de respostas)."""

from ai.utils._json_extractor import extract_json_from_response
from ai.utils.insights_parser import parse_insights_response

__all__ = [
    "extract_json_from_response",
    "parse_insights_response",
]
