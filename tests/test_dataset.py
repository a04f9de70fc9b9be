"""Tests for loading people files."""

import json
import logging

import pytest

from kinmatch.services.dataset import DatasetError, find_person, load_people, split_pool


class TestLoadPeople:
    """Test reading people from JSON files."""

    def test_load_wrapped_list(self, people_file):
        """A {"people": [...]} document loads every record."""
        people = load_people(people_file)

        assert len(people) == 10
        assert people[0].first_name == "John"
        assert people[0].last_name == "Smith"

    def test_load_bare_list_with_snake_case(self, tmp_path):
        """A top-level list with snake_case keys is also accepted."""
        file_path = tmp_path / "people.json"
        file_path.write_text(json.dumps([
            {"id": "a1", "first_name": "Ann", "last_name": "Lee", "age": 30, "location": "Oslo"}
        ]))

        people = load_people(str(file_path))

        assert len(people) == 1
        assert people[0].id == "a1"

    def test_missing_file(self, tmp_path):
        """A missing file raises DatasetError."""
        with pytest.raises(DatasetError):
            load_people(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Unparseable JSON raises DatasetError."""
        file_path = tmp_path / "people.json"
        file_path.write_text("{not json")

        with pytest.raises(DatasetError):
            load_people(file_path)

    def test_wrong_shape(self, tmp_path):
        """A document without a people list is rejected."""
        file_path = tmp_path / "people.json"
        file_path.write_text(json.dumps({"records": []}))

        with pytest.raises(DatasetError, match="list of people"):
            load_people(file_path)

    def test_record_missing_age(self, tmp_path):
        """A record without an age names its position in the error."""
        file_path = tmp_path / "people.json"
        file_path.write_text(json.dumps([
            {"id": 1, "firstName": "Ann", "lastName": "Lee", "age": 30, "location": "Oslo"},
            {"id": 2, "firstName": "Bo", "lastName": "Lee", "location": "Oslo"},
        ]))

        with pytest.raises(DatasetError, match="#1"):
            load_people(file_path)

    def test_negative_age_rejected(self, tmp_path):
        """Ages cannot be negative."""
        file_path = tmp_path / "people.json"
        file_path.write_text(json.dumps([
            {"id": 1, "firstName": "Ann", "lastName": "Lee", "age": -1, "location": "Oslo"}
        ]))

        with pytest.raises(DatasetError):
            load_people(file_path)

    def test_duplicate_ids_warn(self, tmp_path, caplog):
        """Duplicate ids are kept but logged."""
        file_path = tmp_path / "people.json"
        file_path.write_text(json.dumps([
            {"id": 1, "firstName": "Ann", "lastName": "Lee", "age": 30, "location": "Oslo"},
            {"id": 1, "firstName": "Ann", "lastName": "Lee", "age": 31, "location": "Oslo"},
        ]))

        with caplog.at_level(logging.WARNING):
            people = load_people(file_path)

        assert len(people) == 2
        assert "Duplicate person id" in caplog.text


class TestSplitPool:
    """Test separating a target from its comparison pool."""

    def test_split_by_int_id(self, sample_people):
        """The target is removed from the pool."""
        target, pool = split_pool(sample_people, 4)

        assert target.first_name == "Emily"
        assert len(pool) == 9
        assert all(p.id != 4 for p in pool)

    def test_split_by_string_id(self, sample_people):
        """Ids from URLs or the command line match integer ids."""
        target, pool = split_pool(sample_people, "4")

        assert target.id == 4
        assert len(pool) == 9

    def test_unknown_id(self, sample_people):
        """An unknown id gives no target and an empty pool."""
        assert split_pool(sample_people, 99) == (None, [])

    def test_find_person(self, sample_people):
        assert find_person(sample_people, 9).last_name == "Smithe"
        assert find_person(sample_people, "x") is None
