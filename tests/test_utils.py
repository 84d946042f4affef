from __future__ import annotations

import pytest

from conduct_checker.errors import ProtocolError
from conduct_checker.utils import parse_json_object, strip_markdown_fences


class TestStripMarkdownFences:
    def test_strip_markdown_fences_with_json_block(self) -> None:
        wrapped = '```json\n{"result": "SEVERE", "reason": "x"}\n```'
        assert strip_markdown_fences(wrapped) == '{"result": "SEVERE", "reason": "x"}'

    def test_strip_markdown_fences_on_one_line(self) -> None:
        assert strip_markdown_fences('```json{"a": 1}```') == '{"a": 1}'

    def test_strip_markdown_fences_without_language_tag(self) -> None:
        assert strip_markdown_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_strip_markdown_fences_other_language_tag(self) -> None:
        assert strip_markdown_fences('```JSON5 \n{"a": 1}\n```') == '{"a": 1}'

    def test_strip_markdown_fences_surrounding_whitespace(self) -> None:
        assert strip_markdown_fences('\n  ```json\n  {"a": 1}  \n```\n') == '{"a": 1}'

    def test_strip_markdown_fences_no_fences(self) -> None:
        plain = '{"key": "value"}'
        assert strip_markdown_fences(plain) == '{"key": "value"}'

    def test_strip_markdown_fences_ignores_partial_fence(self) -> None:
        text = 'Here you go: ```json\n{"a": 1}\n```'
        assert strip_markdown_fences(text) == text


class TestParseJsonObject:
    def test_parse_json_object_valid(self) -> None:
        assert parse_json_object('{"a": 1, "b": 2}') == {"a": 1, "b": 2}

    def test_parse_json_object_invalid(self) -> None:
        with pytest.raises(ProtocolError, match="not valid JSON"):
            parse_json_object("not json at all")

    def test_parse_json_object_non_dict(self) -> None:
        with pytest.raises(ProtocolError, match="not a JSON object"):
            parse_json_object("[1, 2, 3]")

    def test_parse_json_object_null(self) -> None:
        with pytest.raises(ProtocolError):
            parse_json_object("null")
