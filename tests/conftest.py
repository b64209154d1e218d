"""Configuração do pytest para o projeto follow-insights."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas via lru_cache; cada teste lê o env do zero."""
    from config.settings import (
        get_base_settings,
        get_firestore_settings,
        get_insights_settings,
    )

    getters = (
        get_base_settings,
        get_firestore_settings,
        get_insights_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
