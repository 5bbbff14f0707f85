import random
from typing import Any, Dict, List

import pytest

from satchel.collection import (
    find_one,
    insert_all,
    query,
    remove_records,
    remove_where,
    sorted_view,
)
from satchel.errors import AmbiguousRemovalError, TypeMismatchError, UndefinedValueError


def _ids(records: List[Dict[str, Any]]) -> List[Any]:
    return [record["id"] for record in records]


def test_insert_all_keeps_order_and_uniqueness() -> None:
    rng = random.Random(7)
    collection: List[Dict[str, Any]] = []

    for _ in range(20):
        batch = [{"id": rng.randint(0, 30), "n": rng.random()} for _ in range(rng.randint(0, 6))]
        insert_all(collection, batch)
        ids = _ids(collection)
        assert ids == sorted(set(ids))


def test_insert_all_wraps_single_record_and_ignores_empty() -> None:
    collection: List[Dict[str, Any]] = []

    insert_all(collection, [])
    assert collection == []

    record = {"id": 4}
    insert_all(collection, record)
    assert collection == [record]
    assert collection[0] is record


def test_insert_all_merges_collisions_in_place() -> None:
    stored = {"id": "sushi", "title": "title 1", "obj": {"attr": "hi"}}
    collection = [stored]
    incoming = {"id": "sushi", "title": "new title", "extra": [1, 2]}

    insert_all(collection, incoming)

    assert len(collection) == 1
    assert collection[0] is stored
    assert stored == {"id": "sushi", "title": "new title", "obj": {"attr": "hi"}, "extra": [1, 2]}
    assert stored["extra"] is not incoming["extra"]


def test_insert_all_rejects_mixed_id_types() -> None:
    collection = [{"id": 1}]
    with pytest.raises(TypeMismatchError):
        insert_all(collection, [{"id": 2}, {"id": "two"}])
    # no rollback for records applied before the failure
    assert _ids(collection) == [1, 2]


def test_insert_all_requires_an_id() -> None:
    with pytest.raises(UndefinedValueError):
        insert_all([], {"title": "no id"})


def test_sorted_view(numbered: List[Dict[str, Any]]) -> None:
    by_sort = sorted_view(numbered, "sort")
    assert [record["sort"] for record in by_sort] == [6, 7, 8, 9, 10]
    assert _ids(numbered) == [1, 2, 3, 4, 5]

    same = sorted_view(by_sort, "id", presorted_by="id")
    assert same == by_sort
    assert same is not by_sort

    assert sorted_view([], "anything") == []


def test_sorted_view_strings_and_mismatches() -> None:
    records = [{"id": 1, "name": "pear"}, {"id": 2, "name": "apple"}, {"id": 3, "name": "fig"}]
    assert [r["name"] for r in sorted_view(records, "name")] == ["apple", "fig", "pear"]

    with pytest.raises(TypeMismatchError):
        sorted_view([{"id": 1, "k": 1}, {"id": 2, "k": "one"}], "k")


def test_query_forms(numbered: List[Dict[str, Any]]) -> None:
    numbered.append({"id": 6, "sort": 6})

    everything = query(numbered)
    assert everything == numbered
    assert everything is not numbered

    assert query(numbered, 3) == [numbered[2]]
    assert query(numbered, value=3) == [numbered[2]]
    assert query(numbered, 99) == []
    assert query(numbered, "abc") == []

    assert _ids(query(numbered, "sort", 6)) == [5, 6]
    assert query(numbered, "noExist", 6) == []
    assert query(numbered, "sort", "6") == []


def test_query_string_ids_in_lexicographic_order(worded: List[Dict[str, Any]]) -> None:
    collection: List[Dict[str, Any]] = []
    insert_all(collection, worded)

    assert _ids(query(collection)) == ["act", "art", "bad", "biscuit", "farm", "sushi"]
    assert query(collection, "farm") == [collection[4]]


def test_find_one(numbered: List[Dict[str, Any]]) -> None:
    numbered.append({"id": 6, "sort": 6})

    for record in numbered:
        assert find_one(numbered, record["id"]) is record

    assert find_one(numbered, 999) is None
    assert find_one(numbered, "sort", 6) is numbered[4]
    assert find_one(numbered, "noExist", 999) is None
    assert find_one(numbered, "abcxyz") is None
    assert find_one(numbered, "abcxyz", "sort") is None

    with pytest.raises(UndefinedValueError):
        find_one(numbered)


def test_remove_records(numbered: List[Dict[str, Any]]) -> None:
    collection = list(numbered)
    stranger = {"id": 42}

    removed = remove_records(collection, [numbered[3], stranger, numbered[1]])

    assert removed == [numbered[3], numbered[1]]
    assert _ids(collection) == [1, 3, 5]
    assert remove_records(collection, numbered[0]) == [numbered[0]]
    assert _ids(collection) == [3, 5]


def test_remove_where() -> None:
    collection = [{"id": i, "extra": e} for i, e in enumerate([1, 2, 2, 3, 4, 4, 5], start=1)]

    assert _ids(remove_where(collection, 1)) == [1]
    assert _ids(remove_where(collection, value=2)) == [2]
    assert _ids(remove_where(collection, "extra", 4)) == [5, 6]
    assert _ids(remove_where(collection, "extra", 99)) == []
    assert _ids(collection) == [3, 4, 7]

    with pytest.raises(AmbiguousRemovalError):
        remove_where(collection)


def test_sorted_view_puts_records_without_the_field_last() -> None:
    records = [{"id": 1, "name": "b"}, {"id": 2}, {"id": 3, "name": "a"}, {"id": 4, "name": None}]

    assert _ids(sorted_view(records, "name")) == [3, 1, 2, 4]


def test_sorted_view_by_a_field_no_record_has() -> None:
    records = [{"id": 2}, {"id": 1}]

    assert _ids(sorted_view(records, "nope")) == [2, 1]


def test_query_by_id_field_with_none_value() -> None:
    collection = [{"id": 1, "owner": None}, {"id": 2, "owner": "ann"}]

    assert query(collection, "id", None) == []
    assert find_one(collection, "id", None) is None
    assert query(collection, "owner", None) == [collection[0]]
    assert remove_where(collection, "id", None) == []
    assert _ids(collection) == [1, 2]
