"""Testes do parser de insights e do extrator de JSON."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ai.models.insights import MAX_TITLE_LENGTH, InsightEntry
from ai.utils import extract_json_from_response, parse_insights_response


class TestExtractJsonFromResponse:
    """extract_json_from_response."""

    def test_plain_json(self) -> None:
        assert extract_json_from_response('{"a": 1}') == {"a": 1}

    def test_markdown_block(self) -> None:
        raw = '```json\n{"insights": []}\n```'
        assert extract_json_from_response(raw) == {"insights": []}

    def test_embedded_nested_json(self) -> None:
        """JSON aninhado no meio de texto."""
        raw = 'Aqui está: {"insights": [{"title": "t", "content": "c"}]} fim'
        assert extract_json_from_response(raw) == {
            "insights": [{"title": "t", "content": "c"}]
        }

    @pytest.mark.parametrize("raw", ["", "sem json", "[1, 2]", "{quebrado"])
    def test_no_dict(self, raw: str) -> None:
        assert extract_json_from_response(raw) is None


class TestInsightEntry:
    """InsightEntry."""

    def test_strips_and_truncates(self) -> None:
        entry = InsightEntry(title="  " + "x" * 200 + "  ", content=" ok ")
        assert len(entry.title) == MAX_TITLE_LENGTH
        assert entry.title.endswith("...")
        assert entry.content == "ok"

    def test_blank_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InsightEntry(title="   ", content="c")


class TestParseInsightsResponse:
    """parse_insights_response."""

    def test_valid(self) -> None:
        raw = json.dumps(
            {"insights": [{"title": "A", "content": "a"}, {"title": "B", "content": "b"}]}
        )
        summary = parse_insights_response(raw, max_insights=3)

        assert not summary.fallback_used
        assert [e.title for e in summary.entries] == ["A", "B"]

    def test_invalid_entries_skipped(self) -> None:
        raw = json.dumps(
            {
                "insights": [
                    {"title": "", "content": "x"},
                    "texto solto",
                    {"title": "OK", "content": "fine", "extra": 1},
                ]
            }
        )
        summary = parse_insights_response(raw, max_insights=3)
        assert [e.title for e in summary.entries] == ["OK"]

    def test_capped(self) -> None:
        raw = json.dumps(
            {"insights": [{"title": str(i), "content": "c"} for i in range(5)]}
        )
        assert len(parse_insights_response(raw, max_insights=2).entries) == 2

    def test_parse_error(self) -> None:
        summary = parse_insights_response("nada aqui", max_insights=3)
        assert summary.fallback_used
        assert summary.reason == "parse_error"

    def test_missing_field(self) -> None:
        summary = parse_insights_response('{"other": []}', max_insights=3)
        assert summary.reason == "missing_insights_field"

    def test_to_dict(self) -> None:
        raw = json.dumps({"insights": [{"title": "A", "content": "a"}]})
        assert parse_insights_response(raw, 3).to_dict() == {
            "insights": [{"title": "A", "content": "a"}],
            "fallback_used": False,
            "reason": None,
        }
