import pytest

from aocutils.maputils import (
    add_occurrence,
    append_to,
    contains,
    for_each,
    keys,
    map_items,
    map_values,
    merge,
    occurrences,
    sum_values,
    values,
)


@pytest.mark.parametrize(
    "mapping, key, value, expected",
    [
        ({}, 1, "a", {1: ["a"]}),
        ({1: ["a"]}, 2, "b", {1: ["a"], 2: ["b"]}),
        ({1: ["a"]}, 1, "b", {1: ["a", "b"]}),
    ],
)
def test_append_to(mapping, key, value, expected):
    append_to(mapping, key, value)
    assert mapping == expected


def test_append_to_none():
    with pytest.raises(TypeError):
        append_to(None, 1, "a")


@pytest.mark.parametrize(
    "mapping, key, expected",
    [({}, 1, False), ({1: "a", 2: "b"}, 3, False), ({1: "a", 2: "b"}, 2, True)],
)
def test_contains(mapping, key, expected):
    assert contains(mapping, key) is expected


def test_for_each_mutates_values():
    mapping = {1: ["a"], 2: ["b", "c"]}

    def upper_first(_key, value):
        value[0] = value[0].upper()

    for_each(mapping, upper_first)
    assert mapping == {1: ["A"], 2: ["B", "c"]}


@pytest.mark.parametrize("mapping", [None, {}])
def test_for_each_empty(mapping):
    seen = []
    for_each(mapping, lambda k, v: seen.append((k, v)))
    assert seen == []


@pytest.mark.parametrize(
    "mapping, expected", [(None, []), ({}, []), ({1: "a", 2: "b"}, [1, 2])]
)
def test_keys(mapping, expected):
    assert sorted(keys(mapping)) == expected


@pytest.mark.parametrize(
    "mapping, expected",
    [(None, {}), ({}, {}), ({1: "a", 2: "b"}, {"a": 1, "b": 2})],
)
def test_map_items(mapping, expected):
    assert map_items(mapping, lambda k, v: (v, k)) == expected


@pytest.mark.parametrize(
    "mapping, expected",
    [(None, {}), ({}, {}), ({1: "2", 2: "32"}, {1: 1, 2: 2})],
)
def test_map_values(mapping, expected):
    assert map_values(mapping, len) == expected


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (None, None, {}),
        ({}, {}, {}),
        ({}, {1: "a", 2: "b"}, {1: "a", 2: "b"}),
        ({1: "a", 2: "b"}, {}, {1: "a", 2: "b"}),
        ({1: "a", 2: "b"}, {2: "c", 3: "d"}, {1: "a", 2: "c", 3: "d"}),
    ],
)
def test_merge(first, second, expected):
    assert merge(first, second) == expected


def test_merge_leaves_inputs_untouched():
    first = {1: "a"}
    second = {1: "b"}
    merge(first, second)
    assert first == {1: "a"}
    assert second == {1: "b"}


@pytest.mark.parametrize(
    "mapping, expected",
    [(None, 0), ({}, 0), ({1: 2, 2: 3}, 5), ({1: -2, 2: 3}, 1)],
)
def test_sum_values(mapping, expected):
    assert sum_values(mapping) == expected


def test_sum_values_strings():
    assert sum_values({1: "a", 2: "b"}) == "ab"


@pytest.mark.parametrize(
    "mapping, expected", [(None, []), ({}, []), ({1: "a", 2: "b"}, ["a", "b"])]
)
def test_values(mapping, expected):
    result = values(mapping)
    assert result == expected
    assert len(result) == len(expected)


@pytest.mark.parametrize(
    "items, expected", [([], {}), ([1, 2, 1, 3, 2], {1: 2, 2: 2, 3: 1})]
)
def test_occurrences(items, expected):
    assert occurrences(items) == expected


@pytest.mark.parametrize(
    "mapping, element, count, expected",
    [
        ({}, 1, 1, {1: 1}),
        ({1: 1}, 2, 1, {1: 1, 2: 1}),
        ({1: 1}, 1, 1, {1: 2}),
    ],
)
def test_add_occurrence(mapping, element, count, expected):
    add_occurrence(mapping, element, count)
    assert mapping == expected