"""Testes da classificação e dos extratores por variante."""

from __future__ import annotations

import pytest

from api.normalizers.export_lists import (
    ListShape,
    classify,
    extract_export_record,
    extract_free_text,
    extract_plain_strings,
)
from app.domain.user_record import UserRecord


class TestClassify:
    """classify."""

    @pytest.mark.parametrize(
        ("raw", "shape"),
        [
            ('["a", "b"]', ListShape.PLAIN_STRINGS),
            ("[]", ListShape.PLAIN_STRINGS),
            ('[{"string_list_data": []}]', ListShape.EXPORT_RECORDS),
            ('["a", {"x": 1}]', ListShape.EXPORT_RECORDS),
            ("alice\nbob", ListShape.FREE_TEXT),
            ("7", ListShape.UNRECOGNIZED),
            ("", ListShape.UNRECOGNIZED),
            (None, ListShape.UNRECOGNIZED),
        ],
    )
    def test_shapes(self, raw: str | None, shape: ListShape) -> None:
        assert classify(raw).shape is shape

    def test_bom_stripped(self) -> None:
        """BOM de arquivos salvos no Windows não quebra o parse."""
        classified = classify('\ufeff["a"]')
        assert classified.shape is ListShape.PLAIN_STRINGS
        assert classified.items == ("a",)

    def test_single_list_envelope(self) -> None:
        """Objeto com uma única lista é desembrulhado."""
        classified = classify('{"data": ["a"], "version": 2}')
        assert classified.items == ("a",)

    def test_ambiguous_envelope(self) -> None:
        """Várias listas sem prefixo conhecido: nenhuma é escolhida."""
        assert classify('{"x": ["a"], "y": ["b"]}').shape is ListShape.UNRECOGNIZED

    def test_relationships_prefix_preferred(self) -> None:
        classified = classify('{"relationships_followers": ["a"], "other": ["b"]}')
        assert classified.items == ("a",)

    def test_free_text_keeps_text(self) -> None:
        assert classify("a b").text == "a b"

    @pytest.mark.parametrize("raw", ["[" + "1" * 5000 + "]", "9" * 5000])
    def test_oversized_integer_is_free_text(self, raw: str) -> None:
        """Inteiro acima do limite de dígitos do json não levanta exceção."""
        assert classify(raw).shape is ListShape.FREE_TEXT


class TestExtractors:
    """Extratores por variante."""

    def test_plain_strings_skip_non_strings(self) -> None:
        assert extract_plain_strings([" a ", 1, None, "", "  ", "b"]) == [
            UserRecord(" a "),
            UserRecord("b"),
        ]

    @pytest.mark.parametrize(
        "item",
        [
            None,
            "a",
            {},
            {"string_list_data": []},
            {"string_list_data": ["a"]},
            {"string_list_data": [{"href": "u"}]},
            {"title": "  ", "string_list_data": [{"value": ""}]},
        ],
    )
    def test_export_record_out_of_format(self, item: object) -> None:
        assert extract_export_record(item) is None

    def test_export_record_invalid_metadata_dropped(self) -> None:
        """href/timestamp inválidos não descartam o registro."""
        item = {"string_list_data": [{"value": "a", "href": "", "timestamp": "1"}]}
        assert extract_export_record(item) == UserRecord("a")

    def test_export_record_value_preferred_over_title(self) -> None:
        item = {"title": "t", "string_list_data": [{"value": "v"}]}
        assert extract_export_record(item) == UserRecord("v")

    def test_free_text_tabs_and_cr(self) -> None:
        assert [r.username for r in extract_free_text("a\tA\rb\r\n\t\n c")] == [
            "a",
            "b",
            "c",
        ]
