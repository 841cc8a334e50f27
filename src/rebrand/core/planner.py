# src/rebrand/core/planner.py
from typing import Dict, List

from rebrand.core.variants import build_variants
from rebrand.models import ReplacementPair, ReplacementPlan, VariantSet

# Registration order matters: when two styles render to the same string,
# the earlier entry keeps the slot.
VARIANT_FIELDS = [
    ("original", "Original casing"),
    ("title_case", "Title case"),
    ("pascal_case", "PascalCase"),
    ("camel_case", "camelCase"),
    ("kebab_case", "kebab-case"),
    ("snake_case", "snake_case"),
    ("upper_snake_case", "SCREAMING_SNAKE_CASE"),
    ("upper_flat", "UPPERFLAT"),
    ("flat_lower", "flatlower"),
]


def candidate_pairs(source: VariantSet, target: VariantSet) -> List[ReplacementPair]:
    """One pair per casing style, in registration order, before any filtering."""
    return [
        ReplacementPair(getattr(source, attr), getattr(target, attr), description)
        for attr, description in VARIANT_FIELDS
    ]


def unique_pairs(pairs: List[ReplacementPair]) -> List[ReplacementPair]:
    """
    Drops no-op pairs, keeps the first pair registered for each source and
    orders the survivors longest source first. The sort is stable, so pairs
    of equal length stay in registration order.
    """
    seen: Dict[str, ReplacementPair] = {}
    for pair in pairs:
        if not pair.source or pair.source == pair.target:
            continue
        if pair.source not in seen:
            seen[pair.source] = pair

    return sorted(seen.values(), key=lambda p: len(p.source), reverse=True)


def build_plan(from_name: str, to_name: str) -> ReplacementPlan:
    """
    Builds the replacement plan for renaming `from_name` to `to_name`.

    Raises InvalidNameError (or EmptyTokenSequenceError) if either name has
    no tokens. Identical names give an empty plan.
    """
    source = build_variants(from_name)
    target = build_variants(to_name)

    return ReplacementPlan(
        pairs=tuple(unique_pairs(candidate_pairs(source, target))),
        source_variants=source,
        target_variants=target,
    )
