"""Tests for the structural JSON diff."""
from __future__ import annotations

import json

import pytest

from verdure_admin.db.models import Vocab
from verdure_admin.services.diff import (
    FieldDiff,
    JsonKind,
    compare,
    compare_json,
    json_equal,
    json_kind,
)


def make_vocab(**overrides) -> Vocab:
    values = dict(
        id=7,
        learning_lang="ser",
        first_lang="",
        alternatives="",
        skill="",
        infinitive="",
        pos="",
        hint="",
        num_learning_words=1,
        known_lang_code="en",
        learning_lang_code="es",
    )
    values.update(overrides)
    return Vocab(**values)


def test_identical_documents_have_no_diffs() -> None:
    document = '{"hint":"A hint","nested":{"a":[1,2,{"b":null}]},"n":3}'

    assert compare(document, document) == []
    assert compare_json(document, document) == "[]"


def test_changed_leaves_are_sorted_by_key() -> None:
    before = '{"infinitive":"ser","hint":"A hint"}'
    after = '{"hint":"","infinitive":""}'

    assert compare_json(before, after) == (
        '[{"key":"\'hint\'","before":"A hint","after":""},'
        '{"key":"\'infinitive\'","before":"ser","after":""}]'
    )


def test_removed_top_level_key_has_no_values() -> None:
    diffs = compare('{"name":"Alice","age":30}', '{"name":"Alice"}')

    assert diffs == [FieldDiff(key="'age' removed", removed=True)]
    assert json.loads(compare_json('{"age":30}', "{}")) == [{"key": "'age' removed"}]


def test_nested_leaf_change_uses_dotted_path() -> None:
    before = '{"details":{"city":"New York","zip":"10001"},"name":"John"}'
    after = '{"details":{"city":"Boston","zip":"10001"},"name":"John"}'

    assert compare(before, after) == [
        FieldDiff(key="'details.city'", before="New York", after="Boston")
    ]


def test_nested_removed_key_is_reported_with_full_path() -> None:
    diffs = compare('{"details":{"city":"Lima","zip":"15001"}}', '{"details":{"city":"Lima"}}')

    assert [diff.key for diff in diffs] == ["'details.zip' removed"]


def test_keys_only_present_after_are_not_reported() -> None:
    assert compare('{"name":"Alice"}', '{"name":"Alice","car":"Tesla"}') == []
    assert compare("{}", '{"added":1}') == []


def test_map_replaced_by_scalar_is_not_reported() -> None:
    assert compare('{"details":{"city":"Lima"}}', '{"details":"Lima"}') == []


def test_scalar_replaced_by_map_is_reported() -> None:
    diffs = compare('{"details":"Lima"}', '{"details":{"city":"Lima"}}')

    assert diffs == [FieldDiff(key="'details'", before="Lima", after={"city": "Lima"})]


def test_null_to_value_is_a_change() -> None:
    diffs = compare('{"name":"Alice","age":30,"car":null}', '{"name":"Alice","age":31,"car":"Tesla"}')

    assert compare_json(
        '{"name":"Alice","age":30,"car":null}', '{"name":"Alice","age":31,"car":"Tesla"}'
    ) == '[{"key":"\'age\'","before":30,"after":31},{"key":"\'car\'","before":null,"after":"Tesla"}]'
    assert [diff.key for diff in diffs] == ["'age'", "'car'"]


def test_arrays_compare_by_value() -> None:
    assert compare('{"tags":["a","b"]}', '{"tags":["a","b"]}') == []
    assert compare('{"tags":["a","b"]}', '{"tags":["b","a"]}') == [
        FieldDiff(key="'tags'", before=["a", "b"], after=["b", "a"])
    ]


def test_booleans_are_not_numbers() -> None:
    assert compare('{"flag":true}', '{"flag":1}') == [FieldDiff(key="'flag'", before=True, after=1)]
    assert compare('{"count":1}', '{"count":1.0}') == []


@pytest.mark.parametrize(
    "before, after",
    [
        ("", '{"a":1}'),
        ("not json", '{"a":1}'),
        ('["a"]', '{"a":1}'),
        ('{"a":1', '{"a":1}'),
    ],
)
def test_undecodable_before_yields_no_diffs(before: str, after: str) -> None:
    assert compare(before, after) == []


@pytest.mark.parametrize(
    "document",
    [
        '{"a":' * 100000 + "1" + "}" * 100000,
        "[" * 100000,
    ],
)
def test_too_deeply_nested_documents_yield_no_diffs(document: str) -> None:
    assert compare(document, "{}") == []
    assert compare_json(document, "{}") == "[]"


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_constants_are_undecodable(constant: str) -> None:
    document = f'{{"a":{constant},"b":1}}'

    assert compare(document, document) == []
    assert compare('{"a":1}', document) == [FieldDiff(key="'a' removed", removed=True)]
    json.loads(compare_json('{"a":1}', document))


def test_undecodable_after_reports_every_key_removed() -> None:
    assert [diff.key for diff in compare('{"b":1,"a":2}', "oops")] == ["'a' removed", "'b' removed"]


def test_output_is_sorted_across_nesting_levels() -> None:
    before = '{"z":1,"a":{"y":1,"b":2},"m":"x"}'
    after = '{"z":2,"a":{"y":2,"b":3},"m":"y"}'

    keys = [diff.key for diff in compare(before, after)]

    assert keys == sorted(keys)
    assert keys == ["'a.b'", "'a.y'", "'m'", "'z'"]


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, JsonKind.NULL),
        (False, JsonKind.BOOL),
        (0, JsonKind.NUMBER),
        (1.5, JsonKind.NUMBER),
        ("", JsonKind.STRING),
        ([], JsonKind.ARRAY),
        ({}, JsonKind.OBJECT),
    ],
)
def test_json_kind(value, kind) -> None:
    assert json_kind(value) is kind


def test_json_equal_nested() -> None:
    assert json_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})
    assert not json_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": False}]})
    assert not json_equal({"a": 1}, {"a": 1, "b": 2})


def test_vocab_snapshots_ser() -> None:
    before = make_vocab(alternatives="Alternative", skill="Beginner", infinitive="ser", pos="verb", hint="A hint")
    after = make_vocab(first_lang="to be", skill="Beginner", pos="verb")

    assert compare_json(before.to_json(), after.to_json()) == (
        '[{"key":"\'alternatives\'","before":"Alternative","after":""},'
        '{"key":"\'first_lang\'","before":"","after":"to be"},'
        '{"key":"\'hint\'","before":"A hint","after":""},'
        '{"key":"\'infinitive\'","before":"ser","after":""}]'
    )


def test_vocab_snapshots_perro() -> None:
    before = make_vocab(learning_lang="perro", skill="Pets", pos="noun", hint="not gato")
    after = make_vocab(
        learning_lang="perro",
        first_lang="dog",
        alternatives="perra, perros, perras",
        skill="Pets",
        pos="noun",
        hint="starts with pe",
    )

    assert compare_json(before.to_json(), after.to_json()) == (
        '[{"key":"\'alternatives\'","before":"","after":"perra, perros, perras"},'
        '{"key":"\'first_lang\'","before":"","after":"dog"},'
        '{"key":"\'hint\'","before":"not gato","after":"starts with pe"}]'
    )
