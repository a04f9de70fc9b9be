"""People endpoints for browsing the dataset and ranking family matches"""
from fastapi import APIRouter, Depends, HTTPException
from kinmatch.dependencies import get_matcher, get_people
from kinmatch.schemas import PersonRecord, PersonMatchesResponse
from kinmatch.services.dataset import split_pool
from kinmatch.services.matcher import FamilyMatcher
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/people", response_model=List[PersonRecord])
def list_people(people: List[PersonRecord] = Depends(get_people)):
    """List everyone in the loaded dataset"""
    return people


@router.get("/people/{person_id}/matches", response_model=PersonMatchesResponse)
def get_person_matches(
    person_id: str,
    people: List[PersonRecord] = Depends(get_people),
    matcher: FamilyMatcher = Depends(get_matcher)
):
    """
    Rank possible relatives of one person
    Everyone else in the dataset is the candidate pool
    """
    target, pool = split_pool(people, person_id)

    if target is None:
        raise HTTPException(status_code=404, detail="Person not found")

    matches = matcher.find_family_matches(target, pool)
    logger.info(f"Person {target.id}: {len(matches)} possible relatives out of {len(pool)}")

    return PersonMatchesResponse(target_person=target, matches=matches)
