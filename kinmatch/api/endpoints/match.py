"""Match endpoints for scoring caller-supplied people"""
from fastapi import APIRouter, Depends, HTTPException
from kinmatch.dependencies import get_matcher
from kinmatch.schemas import MatchRequest, MatchResponse, RelationshipRequest, RelationshipResponse
from kinmatch.services.matcher import FamilyMatcher

router = APIRouter()


@router.post("/match", response_model=MatchResponse)
def match_people(request: MatchRequest, matcher: FamilyMatcher = Depends(get_matcher)):
    """
    Rank a pool of people by their likely relationship to a target person
    Returns matches sorted by score, highest first
    """
    if request.target_person is None or request.people_pool is None:
        raise HTTPException(status_code=400, detail="Missing required data")

    matches = matcher.find_family_matches(request.target_person, request.people_pool)
    return MatchResponse(matches=matches)


@router.post("/relationships", response_model=RelationshipResponse)
def compare_people(request: RelationshipRequest, matcher: FamilyMatcher = Depends(get_matcher)):
    """Every relationship rule that fires for a pair, plus their blended name similarity"""
    if request.person_a is None or request.person_b is None:
        raise HTTPException(status_code=400, detail="Missing required data")

    return RelationshipResponse(
        relationships=matcher.find_possible_relationships(request.person_a, request.person_b),
        name_similarity=matcher.calculate_name_similarity(request.person_a, request.person_b)
    )
