"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from kinmatch.config import MatcherConfig
from kinmatch.schemas import PersonRecord
from kinmatch.services.matcher import FamilyMatcher


SAMPLE_PEOPLE: List[Dict[str, Any]] = [
    {"id": 1, "firstName": "John", "lastName": "Smith", "age": 45, "location": "New York"},
    {"id": 2, "firstName": "Jane", "lastName": "Smith", "age": 42, "location": "New York"},
    {"id": 3, "firstName": "Michael", "lastName": "Smith", "age": 15, "location": "New York"},
    {"id": 4, "firstName": "Emily", "lastName": "Smith", "age": 13, "location": "New York"},
    {"id": 5, "firstName": "Robert", "lastName": "Johnson", "age": 70, "location": "Chicago"},
    {"id": 6, "firstName": "Susan", "lastName": "Johnson", "age": 68, "location": "Chicago"},
    {"id": 7, "firstName": "David", "lastName": "Smith", "age": 72, "location": "Boston"},
    {"id": 8, "firstName": "Maria", "lastName": "Garcia", "age": 35, "location": "Miami"},
    {"id": 9, "firstName": "James", "lastName": "Smithe", "age": 40, "location": "New York"},
    {"id": 10, "firstName": "Michael", "lastName": "Johnson", "age": 38, "location": "Chicago"},
]


@pytest.fixture
def sample_people() -> List[PersonRecord]:
    """The ten-person demonstration dataset."""
    return [PersonRecord.model_validate(record) for record in SAMPLE_PEOPLE]


@pytest.fixture
def people_by_id(sample_people) -> Dict[int, PersonRecord]:
    return {person.id: person for person in sample_people}


@pytest.fixture
def matcher() -> FamilyMatcher:
    """Matcher with default thresholds."""
    return FamilyMatcher()


@pytest.fixture
def matcher_factory():
    """Build a matcher from keyword overrides of the default config."""
    def _make(**options) -> FamilyMatcher:
        return FamilyMatcher(MatcherConfig(**options))
    return _make


@pytest.fixture
def people_file(tmp_path) -> Path:
    """Write the sample dataset to a temporary JSON file."""
    file_path = tmp_path / "people.json"
    file_path.write_text(json.dumps({"people": SAMPLE_PEOPLE}, indent=2))
    return file_path


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """The demonstration dataset as plain JSON-style dicts."""
    return [dict(record) for record in SAMPLE_PEOPLE]
