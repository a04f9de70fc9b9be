"""Script to print ranked family matches for one person in a people file"""
import argparse
import sys
from kinmatch.config import get_settings
from kinmatch.services.dataset import load_people, split_pool
from kinmatch.services.matcher import FamilyMatcher


def print_matches(target, matches):
    """Print matches in ranked order with their evidence"""
    print(f"\nPotential family matches for {target.full_name}:")
    print("-" * 70)

    for index, match in enumerate(matches, start=1):
        person = match.person
        print(f"Match #{index}: {person.full_name} ({person.age}, {person.location})")
        print(f"Relationship: {match.relationship} (Score: {match.score:.2f})")
        print(f"Reasons: {', '.join(match.reasons)}")
        print("-" * 70)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Show likely relatives of a person")
    parser.add_argument("person_id", nargs="?", default="4", help="id of the target person (default: 4)")
    parser.add_argument("--data", default=str(settings.people_data_path()), help="JSON file with people")
    args = parser.parse_args()

    people = load_people(args.data)
    target, pool = split_pool(people, args.person_id)

    if target is None:
        print(f"✗ No person with id {args.person_id} in {args.data}")
        return 1

    matcher = FamilyMatcher(settings.matcher_config())
    print_matches(target, matcher.find_family_matches(target, pool))
    return 0


if __name__ == "__main__":
    sys.exit(main())
