"""GEDCOM line parser.

Decodes record lines of the form ``LEVEL [@XREF@] TAG [VALUE]`` and
accumulates the recognised subset of tags into Person/Family records held
by a per-source :class:`ParserState`:

    level 0   INDI, FAM (other record kinds close the open record)
    INDI      NAME (GIVN, SURN), SEX, BIRT/DEAT (DATE, PLAC), FAMS, FAMC
    FAM       HUSB, WIFE, CHIL, MARR (DATE, PLAC), DIV (DATE, PLAC)

Lines that do not match the grammar are skipped. A level-0 record whose id
is already known to the state is skipped as a whole.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional
import re

from .models import Person, Family, clean_id

LINE_PATTERN = re.compile(r"^(\d+)\s+(?:@([^@]+)@\s+)?([A-Z_][A-Z0-9_]*)\s*(.*)$")

_ASCII_NAME = re.compile(r"^[\x00-\x7F]*$")


class GedcomLine(NamedTuple):
    level: int
    xref: Optional[str]
    tag: str
    value: str


def parse_line(text: str) -> Optional[GedcomLine]:
    """Return the decoded line, or None for blank/non-matching text."""
    line = text.strip()
    if not line:
        return None
    m = LINE_PATTERN.match(line)
    if not m:
        return None
    return GedcomLine(int(m.group(1)), m.group(2), m.group(3), m.group(4))


def is_foreign_name(value: str) -> bool:
    return not _ASCII_NAME.match(value)


def apply_name(person: Person, value: str) -> None:
    """Apply a NAME value ('Given /Surname/') to `person`.

    ASCII names are preferred: a stored ASCII given name is kept when a
    non-ASCII name follows, and a stored non-ASCII name is dropped when an
    ASCII name follows.
    """
    foreign = is_foreign_name(value)
    if person.given_name:
        stored_foreign = is_foreign_name(person.given_name)
        if foreign and not stored_foreign:
            return
        if not foreign and stored_foreign:
            person.given_name = None
            person.surname = None
            person.full_name = None

    if "/" not in value:
        person.full_name = value
        return
    parts = value.split("/")
    given = parts[0].strip()
    surname = parts[1].strip()
    person.given_name = given
    person.surname = surname
    person.full_name = " ".join(p for p in (given, surname) if p)


@dataclass
class ParserState:
    """Cursor and working tables for parsing one source."""

    persons: Dict[str, Person] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    current_id: Optional[str] = None
    current_tag: Optional[str] = None
    skip_record: bool = False
    skipped_ids: List[str] = field(default_factory=list)

    def has_id(self, rid: str) -> bool:
        return rid in self.persons or rid in self.families

    def feed(self, text: str) -> None:
        """Consume one raw line of text."""
        line = parse_line(text)
        if line is None:
            return
        if line.level == 0:
            self._open_record(line)
        elif line.level == 1:
            self.current_tag = line.tag
            if self.current_id is not None and not self.skip_record:
                self._level1(self.current_id, line.tag, line.value)
        elif line.level == 2:
            if self.current_id is not None and self.current_tag is not None and not self.skip_record:
                self._level2(self.current_id, self.current_tag, line.tag, line.value)

    def feed_lines(self, lines: Iterable[str]) -> "ParserState":
        for raw in lines:
            self.feed(raw)
        return self

    def _open_record(self, line: GedcomLine) -> None:
        self.current_tag = None
        self.skip_record = False
        if line.xref is None or line.tag not in ("INDI", "FAM"):
            self.current_id = None
            return
        rid = line.xref
        self.current_id = rid
        if self.has_id(rid):
            self.skip_record = True
            self.skipped_ids.append(rid)
            return
        if line.tag == "INDI":
            self.persons[rid] = Person(rid)
        else:
            self.families[rid] = Family(rid)

    def _level1(self, rid: str, tag: str, value: str) -> None:
        person = self.persons.get(rid)
        if person is not None:
            if tag == "NAME":
                apply_name(person, value)
            elif tag == "SEX":
                person.sex = value
            elif tag == "FAMS" and clean_id(value):
                person.add_family_as_spouse(clean_id(value))
            elif tag == "FAMC" and clean_id(value):
                person.add_family_as_child(clean_id(value))
            # BIRT/DEAT carry their data on level-2 lines
            return
        family = self.families.get(rid)
        if family is None:
            return
        if tag == "HUSB":
            family.husband_id = clean_id(value) or None
        elif tag == "WIFE":
            family.wife_id = clean_id(value) or None
        elif tag == "CHIL" and clean_id(value):
            family.add_child(clean_id(value))
        elif tag == "DIV" and value:
            family.divorce_date = value

    def _level2(self, rid: str, parent_tag: str, tag: str, value: str) -> None:
        person = self.persons.get(rid)
        if person is not None:
            if parent_tag == "NAME":
                if tag == "GIVN":
                    person.given_name = value
                elif tag == "SURN":
                    person.surname = value
            elif parent_tag == "BIRT":
                if tag == "DATE":
                    person.birth_date = value
                elif tag == "PLAC":
                    person.birth_place = value
            elif parent_tag == "DEAT":
                if tag == "DATE":
                    person.death_date = value
                elif tag == "PLAC":
                    person.death_place = value
            return
        family = self.families.get(rid)
        if family is None:
            return
        if parent_tag == "MARR":
            if tag == "DATE":
                family.marriage_date = value
            elif tag == "PLAC":
                family.marriage_place = value
        elif parent_tag == "DIV":
            if tag == "DATE":
                family.divorce_date = value
            elif tag == "PLAC":
                family.divorce_place = value
