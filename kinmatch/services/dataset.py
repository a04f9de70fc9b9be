"""Loading of person datasets supplied to the matcher from JSON files"""
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union
from pydantic import ValidationError
from kinmatch.schemas import PersonRecord
import json
import logging

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """A people file could not be read or holds malformed records"""


def load_people(file_path: Union[str, Path]) -> List[PersonRecord]:
    """
    Load people from a JSON file
    Accepts either a list of person objects or {"people": [...]}
    """
    file_path = Path(file_path)

    try:
        with open(file_path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetError(f"Cannot read people file {file_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("people")
    if not isinstance(data, list):
        raise DatasetError(f"{file_path} must contain a list of people or a 'people' list")

    people = []
    seen_ids = set()
    for index, record in enumerate(data):
        try:
            person = PersonRecord.model_validate(record)
        except ValidationError as e:
            raise DatasetError(f"Invalid person record #{index} in {file_path}: {e}") from e

        if person.id in seen_ids:
            logger.warning(f"Duplicate person id {person.id!r} in {file_path}")
        seen_ids.add(person.id)
        people.append(person)

    logger.info(f"Loaded {len(people)} people from {file_path}")
    return people


def find_person(people: Sequence[PersonRecord], person_id) -> Optional[PersonRecord]:
    """Find a person by id, matching ints and their string form alike"""
    for person in people:
        if str(person.id) == str(person_id):
            return person
    return None


def split_pool(people: Sequence[PersonRecord], person_id) -> Tuple[Optional[PersonRecord], List[PersonRecord]]:
    """
    Separate a target from the people it should be compared against
    Returns: (target, pool), or (None, []) if no one has that id
    """
    target = find_person(people, person_id)
    if target is None:
        return None, []

    pool = [person for person in people if person.id != target.id]
    return target, pool
