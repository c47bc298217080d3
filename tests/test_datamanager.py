import pytest

from resourcebook.csvparser import parse_csv_file
from resourcebook.datamanager import (
    DatabaseSaveError,
    Resource,
    ResourceDatabase,
    ResourceNotFoundError,
)


@pytest.fixture
def database(tmp_path):
    return ResourceDatabase(tmp_path / "db.csv")


def test_from_fields_pads_missing_values():
    assert Resource.from_fields(["only"]) == Resource("only", "", "")


def test_from_fields_ignores_extra_values():
    assert Resource.from_fields(["a", "b", "c", "d"]) == Resource("a", "b", "c")


def test_to_fields_round_trip():
    resource = Resource("n", "l", "t")
    assert Resource.from_fields(resource.to_fields()) == resource


def test_add_and_find(database):
    database.add(Resource("doc", "http://example.com", "web"))
    assert database.find("doc") == Resource("doc", "http://example.com", "web")
    assert "doc" in database
    assert len(database) == 1


def test_find_missing_is_none(database):
    assert database.find("nothing") is None
    assert "nothing" not in database


def test_find_returns_first_duplicate(database):
    database.add(Resource("dup", "first", "x"))
    database.add(Resource("dup", "second", "x"))
    assert database.find("dup").link == "first"


def test_delete_removes_first_match_only(database):
    database.add(Resource("dup", "first", "x"))
    database.add(Resource("dup", "second", "x"))
    removed = database.delete("dup")
    assert removed.link == "first"
    assert [r.link for r in database] == ["second"]


def test_delete_missing_raises(database):
    with pytest.raises(ResourceNotFoundError) as info:
        database.delete("ghost")
    assert info.value.name == "ghost"


def test_iteration_keeps_insertion_order(database):
    names = ["a", "b", "c"]
    for name in names:
        database.add(Resource(name))
    assert [r.name for r in database] == names


def test_save_and_load_round_trip(tmp_path, database):
    database.add(Resource("one", "l1", "t1"))
    database.add(Resource("two", "l2", "t2"))
    database.save()
    assert parse_csv_file(database.path) == [["one", "l1", "t1"], ["two", "l2", "t2"]]
    other = ResourceDatabase(database.path)
    assert other.load() == 2
    assert list(other) == list(database)


def test_load_appends_to_existing(database):
    database.add(Resource("x", "y", "z"))
    database.save()
    database.load()
    assert [r.name for r in database] == ["x", "x"]


def test_exists_tracks_file(database):
    assert not database.exists()
    database.add(Resource("x"))
    database.save()
    assert database.exists()


def test_save_empty_raises(database):
    with pytest.raises(DatabaseSaveError):
        database.save()