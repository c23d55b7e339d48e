"""Record model: persons, families and the linked dataset.

Persons and families are keyed by their GEDCOM cross-reference id (without
the ``@`` delimiters). Derived relationship lists (parents, children,
spouses, siblings, resolved husband/wife/children) are filled once by the
linking pass in :mod:`gedcom_analyzer.builder` and hold references to the
records owned by the :class:`Dataset`.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


def clean_id(value: Optional[str]) -> Optional[str]:
    # '@I1@' -> 'I1'
    if value is None:
        return None
    return value.replace("@", "").strip()


class PersonNotFoundError(KeyError):
    """Raised when a requested person id is not part of the dataset."""

    def __init__(self, person_id: str) -> None:
        super().__init__(person_id)
        self.person_id = person_id

    def __str__(self) -> str:
        return f"Person with ID '{self.person_id}' not found"


@dataclass(eq=False)
class Person:
    id: str
    given_name: Optional[str] = None
    surname: Optional[str] = None
    full_name: Optional[str] = None
    sex: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_date: Optional[str] = None
    death_place: Optional[str] = None
    family_ids_as_child: List[str] = field(default_factory=list)
    family_ids_as_spouse: List[str] = field(default_factory=list)
    # derived by the linking pass
    parents: List["Person"] = field(default_factory=list, repr=False)
    children: List["Person"] = field(default_factory=list, repr=False)
    spouses: List["Person"] = field(default_factory=list, repr=False)
    siblings: List["Person"] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def add_family_as_child(self, family_id: str) -> None:
        if family_id not in self.family_ids_as_child:
            self.family_ids_as_child.append(family_id)

    def add_family_as_spouse(self, family_id: str) -> None:
        if family_id not in self.family_ids_as_spouse:
            self.family_ids_as_spouse.append(family_id)

    @property
    def display_name(self) -> str:
        if self.full_name and self.full_name.strip():
            return self.full_name
        parts = [p.strip() for p in (self.given_name, self.surname) if p and p.strip()]
        if not parts:
            return f"Unknown ({self.id})"
        return " ".join(parts)

    @property
    def life_dates(self) -> str:
        dates = []
        if self.birth_date and self.birth_date.strip():
            dates.append(f"b. {self.birth_date.strip()}")
        if self.death_date and self.death_date.strip():
            dates.append(f"d. {self.death_date.strip()}")
        return " - ".join(dates)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.id})"


@dataclass(eq=False)
class Family:
    id: str
    husband_id: Optional[str] = None
    wife_id: Optional[str] = None
    children_ids: List[str] = field(default_factory=list)
    marriage_date: Optional[str] = None
    marriage_place: Optional[str] = None
    divorce_date: Optional[str] = None
    divorce_place: Optional[str] = None
    # derived by the linking pass
    husband: Optional[Person] = field(default=None, repr=False)
    wife: Optional[Person] = field(default=None, repr=False)
    children: List[Person] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Family):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def add_child(self, child_id: str) -> None:
        if child_id not in self.children_ids:
            self.children_ids.append(child_id)

    @property
    def parents(self) -> List[Person]:
        return [p for p in (self.husband, self.wife) if p is not None]

    def spouse_of(self, person: Person) -> Optional[Person]:
        """Return the other resolved spouse of `person` in this family."""
        if person.id == self.husband_id:
            return self.wife
        if person.id == self.wife_id:
            return self.husband
        return None

    @property
    def display_name(self) -> str:
        husband = self.husband.display_name if self.husband else (f"Husband {self.husband_id}" if self.husband_id else None)
        wife = self.wife.display_name if self.wife else (f"Wife {self.wife_id}" if self.wife_id else None)
        if husband is None and wife is None:
            return f"Family {self.id}"
        return " & ".join(n for n in (husband, wife) if n)

    @property
    def marriage_info(self) -> str:
        info = ""
        if self.marriage_date and self.marriage_date.strip():
            info = f"m. {self.marriage_date.strip()}"
        if self.marriage_place and self.marriage_place.strip():
            info = f"{info} in {self.marriage_place.strip()}" if info else self.marriage_place.strip()
        if self.divorce_date and self.divorce_date.strip():
            div = f"div. {self.divorce_date.strip()}"
            info = f"{info} - {div}" if info else div
        return info

    def __str__(self) -> str:
        s = f"Family {self.id}: {self.display_name}"
        if self.children:
            s += f" ({len(self.children)} children)"
        return s


class Dataset:
    """Linked set of persons and families.

    The mappings are exposed read-only; the dataset is not modified after
    the linking pass that created it.
    """

    def __init__(self, persons: Dict[str, Person], families: Dict[str, Family]) -> None:
        self._persons = dict(persons)
        self._families = dict(families)

    @property
    def persons(self) -> Mapping[str, Person]:
        return MappingProxyType(self._persons)

    @property
    def families(self) -> Mapping[str, Family]:
        return MappingProxyType(self._families)

    @property
    def person_count(self) -> int:
        return len(self._persons)

    @property
    def family_count(self) -> int:
        return len(self._families)

    def get_person(self, raw_id: Optional[str]) -> Optional[Person]:
        pid = clean_id(raw_id)
        if not pid:
            return None
        return self._persons.get(pid)

    def require_person(self, raw_id: Optional[str]) -> Person:
        """Return the person for `raw_id` (``@`` delimiters allowed).

        Raises PersonNotFoundError when the id is not part of the dataset.
        """
        person = self.get_person(raw_id)
        if person is None:
            raise PersonNotFoundError(clean_id(raw_id) or "")
        return person

    def get_family(self, raw_id: Optional[str]) -> Optional[Family]:
        fid = clean_id(raw_id)
        if not fid:
            return None
        return self._families.get(fid)

    def __repr__(self) -> str:
        return f"Dataset(persons={self.person_count}, families={self.family_count})"
