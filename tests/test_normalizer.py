import pytest

from JsonToDDL.core.normalizer import JsonNormalizer
from JsonToDDL.errors import MalformedInputError


def test_load_parses_text():
    assert JsonNormalizer.load('{"a": 1}') == {"a": 1}
    assert JsonNormalizer.load(b'{"a": [1, 2]}') == {"a": [1, 2]}


def test_load_keeps_parsed_objects():
    document = {"a": 1}
    assert JsonNormalizer.load(document) is document


def test_load_keeps_key_order():
    assert list(JsonNormalizer.load('{"z": 1, "a": 2, "m": 3}')) == ["z", "a", "m"]


@pytest.mark.parametrize("data", ["{not json", "", '{"a": 1'])
def test_invalid_json(data):
    with pytest.raises(MalformedInputError, match="could not be parsed"):
        JsonNormalizer.load(data)


@pytest.mark.parametrize("data", ["[1, 2]", "42", '"text"', "null", [{"a": 1}]])
def test_root_must_be_an_object(data):
    with pytest.raises(MalformedInputError, match="must be an object"):
        JsonNormalizer.load(data)


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        JsonNormalizer.load("[]")


def test_load_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text('{"name": "Ana"}', encoding="utf-8")
    assert JsonNormalizer.load_file(path) == {"name": "Ana"}
