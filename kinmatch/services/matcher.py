"""Rule-based matching service for sibling and parent/child relationships"""
from rapidfuzz import fuzz
from typing import List, Optional, Sequence
import logging
from kinmatch.config import MatcherConfig, RuleWeights
from kinmatch.schemas import PersonRecord, RelationshipFinding, MatchResult

logger = logging.getLogger(__name__)


class FamilyMatcher:
    """Scores how plausibly two people are siblings or parent and child"""

    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or MatcherConfig()

    @staticmethod
    def string_similarity(text1: str, text2: str) -> float:
        """
        Case-insensitive similarity of two strings
        Returns: 0.0 to 1.0 (1.0 = identical)
        """
        return fuzz.ratio(text1.lower(), text2.lower()) / 100.0

    @staticmethod
    def calculate_surname_similarity(person1: PersonRecord, person2: PersonRecord) -> float:
        """Similarity between last names only"""
        return FamilyMatcher.string_similarity(person1.last_name, person2.last_name)

    @staticmethod
    def calculate_name_similarity(person1: PersonRecord, person2: PersonRecord) -> float:
        """
        Blend of surname and full name similarity
        Returns: 0.0 to 1.0

        Not used by the relationship rules, which look at surnames only.
        """
        full_name_sim = FamilyMatcher.string_similarity(person1.full_name, person2.full_name)
        surname_sim = FamilyMatcher.calculate_surname_similarity(person1, person2)

        # Weight surname matches higher (70% surname, 30% full name)
        return surname_sim * 0.7 + full_name_sim * 0.3

    def _score_shared_traits(self, person1: PersonRecord, person2: PersonRecord,
                             relationship: str, weights: RuleWeights,
                             age_matches: bool, age_reason: str) -> RelationshipFinding:
        score = 0.0
        reasons = []

        surname_sim = self.calculate_surname_similarity(person1, person2)
        if surname_sim >= self.config.surname_similarity_threshold:
            score += weights.surname
            reasons.append(f"Same surname ({round(surname_sim * 100)}% match)")

        if age_matches:
            score += weights.age
            reasons.append(age_reason)

        # Without an exact location requirement there is no location evidence at all
        if self.config.location_exact_required and person1.location == person2.location:
            score += weights.location
            reasons.append("Same location")

        return RelationshipFinding(
            relationship=relationship,
            score=score,
            reasons=reasons,
            is_likely=score >= self.config.likely_threshold
        )

    def check_sibling_potential(self, person1: PersonRecord, person2: PersonRecord) -> RelationshipFinding:
        """Check if two people might be siblings (symmetric in its arguments)"""
        age_diff = abs(person1.age - person2.age)
        return self._score_shared_traits(
            person1, person2, "sibling",
            weights=self.config.sibling_weights,
            age_matches=age_diff <= self.config.sibling_max_age_gap,
            age_reason=f"Age difference ({age_diff} years) consistent with siblings"
        )

    def check_parent_child_potential(self, parent: PersonRecord, child: PersonRecord) -> RelationshipFinding:
        """
        Check if `parent` might be a parent of `child`
        The age difference is signed: a younger `parent` never satisfies the age window
        """
        age_diff = parent.age - child.age
        gap = self.config.parent_child_age_gap
        return self._score_shared_traits(
            parent, child, "parent-child",
            weights=self.config.parent_child_weights,
            age_matches=gap.min <= age_diff <= gap.max,
            age_reason=f"Age difference ({age_diff} years) consistent with parent-child"
        )

    def find_possible_relationships(self, person1: PersonRecord, person2: PersonRecord) -> List[RelationshipFinding]:
        """
        Evaluate every rule for a pair
        Returns: findings with a non-zero score, in order sibling, parent-child, child-parent
        """
        if person1.id == person2.id:
            return []

        sibling = self.check_sibling_potential(person1, person2)
        parent_child = self.check_parent_child_potential(person1, person2)
        # Same rule with the roles swapped, reported from person1's point of view
        child_parent = self.check_parent_child_potential(person2, person1).model_copy(
            update={"relationship": "child-parent"}
        )

        return [finding for finding in (sibling, parent_child, child_parent) if finding.score > 0]

    def find_family_matches(self, target: PersonRecord, pool: Sequence[PersonRecord]) -> List[MatchResult]:
        """
        Rank pool members by their best relationship to the target
        Returns: one MatchResult per related pool member, highest score first
        """
        matches = []

        for person in pool:
            relationships = self.find_possible_relationships(target, person)
            if not relationships:
                continue

            # max() keeps the first of equal scores, so rule order breaks ties
            best = max(relationships, key=lambda finding: finding.score)
            matches.append(MatchResult(person=person, **best.model_dump()))

        # Sort by score descending, equal scores keep pool order
        matches.sort(key=lambda match: match.score, reverse=True)

        logger.debug(f"Found {len(matches)} matches for person {target.id} in pool of {len(pool)}")
        return matches
