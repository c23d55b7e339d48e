"""Kinship label helpers used by the reports.

APIs:
    ordinal(n) -> str
    cousin_degree_label(degree) -> str
    ancestor_generation_label(generation) -> str
    descendant_generation_label(generation) -> str
    relationship_label(code) -> str

`code` is a value returned by relationship.relationship_degree.
"""
from .relationship import ANCESTOR_OR_DESCENDANT, NOT_RELATED


def ordinal(n: int) -> str:
    if 10 <= (n % 100) <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def cousin_degree_label(degree: int) -> str:
    if degree < 1:
        raise ValueError("cousin degree must be >= 1")
    return f"{ordinal(degree)} cousin"


def _generation_label(generation: int, first: str, plural: str) -> str:
    if generation < 1:
        raise ValueError("generation must be >= 1")
    if generation == 1:
        return first
    if generation == 2:
        return plural
    return f"Great {generation - 2} {plural}"


def ancestor_generation_label(generation: int) -> str:
    # 1 -> Parents, 2 -> Grandparents, 3 -> Great 1 Grandparents
    return _generation_label(generation, "Parents", "Grandparents")


def descendant_generation_label(generation: int) -> str:
    return _generation_label(generation, "Children", "Grandchildren")


def relationship_label(code: int) -> str:
    """Return a short description for a relationship_degree result."""
    if code == 0:
        return "self"
    if code == 1:
        return "sibling"
    if code >= 2:
        return cousin_degree_label(code - 1)
    if code == ANCESTOR_OR_DESCENDANT:
        return "ancestor/descendant"
    if code == NOT_RELATED:
        return "not related"
    raise ValueError(f"unknown relationship code {code}")
