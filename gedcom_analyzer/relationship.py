"""Relationship queries over a linked Dataset.

All functions are read-only: they walk the derived parent/child/sibling
lists of the Person records and never modify them, so they may be called
concurrently on a dataset that is no longer being built.

API:
    ancestors(person, max_generations=None) -> Set[Person]
    descendants(person, max_generations=None) -> Set[Person]
    siblings(person) -> List[Person]
    cousins(person, degree) -> Set[Person]
    cousins_grouped_by_family(person, degree) -> Dict[str, List[Person]]
    all_cousins(person, max_degree=6) -> Set[Person]
    relationship_degree(a, b) -> int
    ancestors_by_generation(person) -> Dict[int, List[Person]]
    descendants_by_generation(person) -> Dict[int, List[Person]]

Cousins of degree k are found by walking k parent-steps up, taking the
siblings of the persons reached (the children of the shared ancestors
k+1 generations up), then walking k child-steps back down. Anyone closer
(self, siblings, lower-degree cousins) is removed, so degrees partition.
"""
from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional, Set

from .models import Person

MAX_COUSIN_DEGREE = 6

# relationship_degree codes besides 0 (self), 1 (sibling), n >= 2 (cousin)
ANCESTOR_OR_DESCENDANT = -2
NOT_RELATED = -1

_Edges = Callable[[Person], List[Person]]


def _parents(p: Person) -> List[Person]:
    return p.parents


def _children(p: Person) -> List[Person]:
    return p.children


def _siblings(p: Person) -> List[Person]:
    return p.siblings


def _closure(person: Person, edges: _Edges, max_generations: Optional[int]) -> Set[Person]:
    if max_generations is not None and max_generations < 1:
        # zero or negative bounds mean no bound
        max_generations = None
    found: Set[Person] = set()
    frontier = [person]
    generation = 0
    while frontier and (max_generations is None or generation < max_generations):
        nxt: List[Person] = []
        for cur in frontier:
            for rel in edges(cur):
                if rel == person or rel in found:
                    continue
                found.add(rel)
                nxt.append(rel)
        frontier = nxt
        generation += 1
    return found


def ancestors(person: Person, max_generations: Optional[int] = None) -> Set[Person]:
    """Return every ancestor of `person`, optionally bounded in generations."""
    return _closure(person, _parents, max_generations)


def descendants(person: Person, max_generations: Optional[int] = None) -> Set[Person]:
    """Return every descendant of `person`, optionally bounded in generations."""
    return _closure(person, _children, max_generations)


def siblings(person: Person) -> List[Person]:
    return list(person.siblings)


def _step(level: Iterable[Person], edges: _Edges) -> List[Person]:
    # one generation step along every path, deduplicated in encounter order
    seen: Dict[Person, None] = {}
    for p in level:
        for rel in edges(p):
            seen.setdefault(rel, None)
    return list(seen)


def _cousin_candidates(person: Person, degree: int) -> List[Person]:
    level: List[Person] = [person]
    for _ in range(degree):
        level = _step(level, _parents)
    level = _step(level, _siblings)
    for _ in range(degree):
        level = _step(level, _children)
    return level


def _closer_than(person: Person, degree: int) -> Set[Person]:
    """Self, siblings and all cousins of degree < `degree`."""
    closer: Set[Person] = {person}
    closer.update(person.siblings)
    for d in range(1, degree):
        closer.update(_cousin_candidates(person, d))
    return closer


def cousins(person: Person, degree: int) -> Set[Person]:
    """Return the cousins of `person` of exactly the given degree.

    Degrees below 1 have no cousins.
    """
    if degree < 1:
        return set()
    closer = _closer_than(person, degree)
    return {c for c in _cousin_candidates(person, degree) if c not in closer}


def cousins_grouped_by_family(person: Person, degree: int) -> Dict[str, List[Person]]:
    """Group the degree-`degree` cousins by the families they are children of.

    A cousin recorded as a child in several families is listed under each of
    them; families left without cousins are omitted.
    """
    if degree < 1:
        return {}
    closer = _closer_than(person, degree)
    grouped: Dict[str, List[Person]] = {}
    for cousin in _cousin_candidates(person, degree):
        for family_id in cousin.family_ids_as_child:
            grouped.setdefault(family_id, []).append(cousin)
    for family_id in list(grouped):
        kept = [c for c in grouped[family_id] if c not in closer]
        if kept:
            grouped[family_id] = kept
        else:
            del grouped[family_id]
    return grouped


def all_cousins(person: Person, max_degree: int = MAX_COUSIN_DEGREE) -> Set[Person]:
    """Union of cousins(person, d) for d in 1..max_degree."""
    result: Set[Person] = set()
    for degree in range(1, max_degree + 1):
        result |= cousins(person, degree)
    return result


def relationship_degree(a: Person, b: Person) -> int:
    """Classify how `b` relates to `a`.

    Returns 0 for the same person, 1 for siblings, d + 1 for cousins of
    degree d (1..6), -2 when one is an ancestor of the other and -1 when
    none of these apply. Checks run in that order; the first match wins.
    """
    if a == b:
        return 0
    if b in a.siblings:
        return 1
    for degree in range(1, MAX_COUSIN_DEGREE + 1):
        if b in cousins(a, degree):
            return degree + 1
    if b in ancestors(a) or a in ancestors(b):
        return ANCESTOR_OR_DESCENDANT
    return NOT_RELATED


def _by_generation(person: Person, edges: _Edges) -> Dict[int, List[Person]]:
    # A single visited set covers the whole walk: someone reachable at two
    # depths is only listed at the first depth it is reached.
    result: Dict[int, List[Person]] = {}
    visited: Set[Person] = {person}
    frontier = [person]
    generation = 1
    while frontier:
        nxt: List[Person] = []
        for cur in frontier:
            for rel in edges(cur):
                if rel in visited:
                    continue
                visited.add(rel)
                nxt.append(rel)
        if nxt:
            result[generation] = nxt
        frontier = nxt
        generation += 1
    return result


def ancestors_by_generation(person: Person) -> Dict[int, List[Person]]:
    """Ancestors keyed by generation (1 = parents, 2 = grandparents, ...)."""
    return _by_generation(person, _parents)


def descendants_by_generation(person: Person) -> Dict[int, List[Person]]:
    """Descendants keyed by generation (1 = children, 2 = grandchildren, ...)."""
    return _by_generation(person, _children)
