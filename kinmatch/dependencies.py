"""Shared FastAPI dependencies: the configured matcher and the people dataset"""
from functools import lru_cache
from typing import List
from kinmatch.config import get_settings
from kinmatch.schemas import PersonRecord
from kinmatch.services.dataset import load_people
from kinmatch.services.matcher import FamilyMatcher


@lru_cache()
def get_matcher() -> FamilyMatcher:
    return FamilyMatcher(get_settings().matcher_config())


@lru_cache()
def get_people() -> List[PersonRecord]:
    return load_people(get_settings().people_data_path())
