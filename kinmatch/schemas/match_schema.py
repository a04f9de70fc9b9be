from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional
from kinmatch.schemas.person_schema import PersonRecord

RelationshipType = Literal["sibling", "parent-child", "child-parent"]


class RelationshipFinding(BaseModel):
    relationship: RelationshipType
    score: float
    reasons: List[str]  # surname, age, location - in the order they were checked
    is_likely: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MatchResult(RelationshipFinding):
    """Best finding for one pool member, together with that member"""
    person: PersonRecord


class MatchRequest(BaseModel):
    target_person: Optional[PersonRecord] = None
    people_pool: Optional[List[PersonRecord]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MatchResponse(BaseModel):
    matches: List[MatchResult]


class PersonMatchesResponse(BaseModel):
    target_person: PersonRecord
    matches: List[MatchResult]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RelationshipRequest(BaseModel):
    person_a: Optional[PersonRecord] = None
    person_b: Optional[PersonRecord] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RelationshipResponse(BaseModel):
    relationships: List[RelationshipFinding]
    name_similarity: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
