import pytest

from utils import parse_ai_response, strip_code_fence


@pytest.mark.parametrize(
    "text, expected",
    [
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('```json{"a": 1}```', '{"a": 1}'),
        ('  {"a": 1}  \n', '{"a": 1}'),
        ('{"a": 1}\n```\n', '{"a": 1}'),
        ('```python\nprint(1)\n```', "```python\nprint(1)"),
    ],
)
def test_strip_code_fence(text, expected):
    assert strip_code_fence(text) == expected


def test_inner_fences_are_kept():
    text = '```json\n{"snippet": "```json x```"}\n```'
    assert strip_code_fence(text) == '{"snippet": "```json x```"}'


def test_parse_ai_response_decodes_fenced_json():
    assert parse_ai_response('```json\n{"items": [1, 2]}\n```') == {"items": [1, 2]}


def test_parse_ai_response_invalid_json():
    assert parse_ai_response("not json at all") == {"error": "AI returned an invalid format."}


def test_parse_ai_response_empty_text():
    assert parse_ai_response("```json\n```") == {"error": "AI returned an invalid format."}


@pytest.mark.parametrize("text", ["NaN", '{"a": Infinity}', '```json\n[1, -Infinity]\n```', '{"big": 1e999}'])
def test_parse_ai_response_rejects_non_standard_numbers(text):
    assert parse_ai_response(text) == {"error": "AI returned an invalid format."}


def test_parse_ai_response_keeps_ordinary_floats():
    assert parse_ai_response('{"score": 0.75, "exp": 1e3}') == {"score": 0.75, "exp": 1000.0}
