"""Build a linked :class:`Dataset` from one or more GEDCOM sources.

API:
    parse(source, encoding="utf-8-sig") -> Dataset
    parse_and_merge(sources, encoding="utf-8-sig") -> Dataset
    link(persons, families) -> Dataset

Each source is parsed into its own ParserState. Record tables are merged in
source order (the first definition of an id wins, later duplicates are
discarded whole) and a single linking pass then resolves every
cross-reference into the derived relationship lists.
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO, Union
import logging
import os

from .gedcom_adapter import ParserState
from .models import Dataset, Family, Person

Source = Union[str, "os.PathLike[str]", Iterable[str], TextIO]

DEFAULT_ENCODING = "utf-8-sig"


def _source_name(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    return getattr(source, "name", None) or type(source).__name__


def parse_source(source: Source, encoding: str = DEFAULT_ENCODING) -> ParserState:
    """Parse a single source into a fresh ParserState (no linking).

    A path is opened with `encoding`; anything else is iterated as lines.
    OSError from opening or reading a path propagates to the caller.
    """
    state = ParserState()
    if isinstance(source, (str, os.PathLike)):
        with Path(source).open("r", encoding=encoding, errors="replace") as f:
            state.feed_lines(f)
    else:
        state.feed_lines(source)
    for rid in state.skipped_ids:
        logging.debug("Skipping duplicate record %s in %s", rid, _source_name(source))
    return state


def _append_unique(target: List[Person], person: Optional[Person], owner: Person) -> None:
    if person is None or person == owner:
        return
    if person not in target:
        target.append(person)


def link(persons: Dict[str, Person], families: Dict[str, Family]) -> Dataset:
    """Resolve id references and derive the relationship lists.

    Unresolved ids are dropped; derived lists never contain duplicates or
    the person themselves.
    """
    for family in families.values():
        family.husband = persons.get(family.husband_id) if family.husband_id else None
        family.wife = persons.get(family.wife_id) if family.wife_id else None
        family.children = [persons[cid] for cid in family.children_ids if cid in persons]

    for person in persons.values():
        child_fams = [families[fid] for fid in person.family_ids_as_child if fid in families]
        spouse_fams = [families[fid] for fid in person.family_ids_as_spouse if fid in families]

        for fam in child_fams:
            _append_unique(person.parents, fam.husband, person)
            _append_unique(person.parents, fam.wife, person)

        for fam in spouse_fams:
            _append_unique(person.spouses, fam.spouse_of(person), person)

        for fam in child_fams:
            for sibling in fam.children:
                _append_unique(person.siblings, sibling, person)
                # symmetric even when the sibling lacks the FAMC line
                _append_unique(sibling.siblings, person, sibling)

        for fam in spouse_fams:
            for child in fam.children:
                _append_unique(person.children, child, person)

    return Dataset(persons, families)


def _merge_into(persons: Dict[str, Person], families: Dict[str, Family], state: ParserState) -> int:
    discarded = 0
    for rid, person in state.persons.items():
        if rid in persons or rid in families:
            discarded += 1
            continue
        persons[rid] = person
    for rid, family in state.families.items():
        if rid in persons or rid in families:
            discarded += 1
            continue
        families[rid] = family
    return discarded


def parse_and_merge(sources: Iterable[Source], encoding: str = DEFAULT_ENCODING) -> Dataset:
    """Parse `sources` in order, merge them first-wins by id and link once."""
    persons: Dict[str, Person] = {}
    families: Dict[str, Family] = {}
    for source in sources:
        name = _source_name(source)
        logging.info("Parsing GEDCOM source %s", name)
        state = parse_source(source, encoding=encoding)
        discarded = _merge_into(persons, families, state)
        if discarded:
            logging.debug("Discarded %d records of %s already defined by an earlier source", discarded, name)
    dataset = link(persons, families)
    logging.info("Linked %d persons and %d families", dataset.person_count, dataset.family_count)
    return dataset


def parse(source: Source, encoding: str = DEFAULT_ENCODING) -> Dataset:
    """Parse and link a single source."""
    return parse_and_merge([source], encoding=encoding)
