from kinmatch.schemas.person_schema import PersonRecord
from kinmatch.schemas.match_schema import (
    RelationshipType,
    RelationshipFinding,
    MatchResult,
    MatchRequest,
    MatchResponse,
    PersonMatchesResponse,
    RelationshipRequest,
    RelationshipResponse,
)

__all__ = [
    "PersonRecord",
    "RelationshipType",
    "RelationshipFinding",
    "MatchResult",
    "MatchRequest",
    "MatchResponse",
    "PersonMatchesResponse",
    "RelationshipRequest",
    "RelationshipResponse",
]
