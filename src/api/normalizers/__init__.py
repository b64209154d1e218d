"""Normalizers: conversão de entradas externas para modelos internos.

Estrutura:
- export_lists/: listas de followers/following/pending/blocked/unfollowed
  (arquivos de export JSON ou texto colado)
"""

from .export_lists import normalize, normalize_input, normalize_inputs

__all__ = [
    "normalize",
    "normalize_input",
    "normalize_inputs",
]
