import pytest

from gedcom_analyzer.gedcom_adapter import GedcomLine, ParserState, apply_name, is_foreign_name, parse_line
from gedcom_analyzer.models import Person


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0 @I1@ INDI", GedcomLine(0, "I1", "INDI", "")),
        ("1 NAME John /Doe/", GedcomLine(1, None, "NAME", "John /Doe/")),
        ("2 DATE 1 JAN 1900", GedcomLine(2, None, "DATE", "1 JAN 1900")),
        ("  1 SEX M  ", GedcomLine(1, None, "SEX", "M")),
        ("1 FAMS @F1@", GedcomLine(1, None, "FAMS", "@F1@")),
        ("0 TRLR", GedcomLine(0, None, "TRLR", "")),
        ("1 _UID 1234", GedcomLine(1, None, "_UID", "1234")),
    ],
)
def test_parse_line(text, expected):
    assert parse_line(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "garbage", "NAME John", "1 name lower", "x 1 NAME y", "-1 NAME y"])
def test_parse_line_rejects_non_matching(text):
    assert parse_line(text) is None


def test_split_name():
    p = Person(id="I1")
    apply_name(p, "John Paul /Doe/")
    assert p.given_name == "John Paul"
    assert p.surname == "Doe"
    assert p.full_name == "John Paul Doe"


def test_name_without_slash_is_full_name():
    p = Person(id="I1")
    apply_name(p, "Madonna")
    assert p.full_name == "Madonna"
    assert p.given_name is None


def test_surname_only():
    p = Person(id="I1")
    apply_name(p, "/Doe/")
    assert p.given_name == ""
    assert p.full_name == "Doe"


def test_foreign_name_does_not_replace_ascii_name():
    p = Person(id="I1")
    apply_name(p, "John /Cohen/")
    apply_name(p, "יוחנן /כהן/")
    assert p.given_name == "John"
    assert p.surname == "Cohen"
    assert p.full_name == "John Cohen"


def test_ascii_name_replaces_foreign_name():
    p = Person(id="I1")
    apply_name(p, "Jürgen /Müller/")
    assert p.given_name == "Jürgen"
    apply_name(p, "Juergen")
    # the stored foreign parts are cleared before the new value is applied
    assert p.given_name is None
    assert p.surname is None
    assert p.full_name == "Juergen"


def test_is_foreign_name():
    assert not is_foreign_name("John /Doe/")
    assert is_foreign_name("José /García/")


def _state(text):
    return ParserState().feed_lines(text.strip().splitlines())


def test_records_and_fields():
    st = _state("""
0 @I1@ INDI
1 NAME John /Doe/
1 SEX M
1 BIRT
2 DATE 1 JAN 1900
2 PLAC Paris
1 DEAT
2 DATE 1970
2 PLAC Lyon
1 FAMC @F1@
1 FAMS @F2@
0 @F2@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
1 CHIL @I3@
1 MARR
2 DATE 2 FEB 1925
2 PLAC Nice
1 DIV
2 DATE 1930
2 PLAC Rome
""")
    p = st.persons["I1"]
    assert (p.given_name, p.surname, p.sex) == ("John", "Doe", "M")
    assert (p.birth_date, p.birth_place) == ("1 JAN 1900", "Paris")
    assert (p.death_date, p.death_place) == ("1970", "Lyon")
    assert p.family_ids_as_child == ["F1"]
    assert p.family_ids_as_spouse == ["F2"]
    f = st.families["F2"]
    assert (f.husband_id, f.wife_id, f.children_ids) == ("I1", "I2", ["I3"])
    assert (f.marriage_date, f.marriage_place) == ("2 FEB 1925", "Nice")
    assert (f.divorce_date, f.divorce_place) == ("1930", "Rome")


def test_givn_surn_subfields():
    st = _state("""
0 @I1@ INDI
1 NAME John /Doe/
2 GIVN Johnny
2 SURN Doh
""")
    p = st.persons["I1"]
    assert p.given_name == "Johnny"
    assert p.surname == "Doh"


def test_level1_div_value_is_divorce_date():
    st = _state("""
0 @F1@ FAM
1 DIV 1931
""")
    assert st.families["F1"].divorce_date == "1931"


def test_date_belongs_to_enclosing_event():
    st = _state("""
0 @I1@ INDI
1 BIRT
2 DATE 1900
1 NAME A /B/
2 DATE 1999
""")
    p = st.persons["I1"]
    assert p.birth_date == "1900"
    assert p.death_date is None


def test_duplicate_record_skipped_whole():
    st = _state("""
0 @I1@ INDI
1 NAME First /One/
0 @I1@ INDI
1 NAME Second /Two/
1 SEX F
0 @I2@ INDI
1 NAME Third /Three/
""")
    assert st.persons["I1"].full_name == "First One"
    assert st.persons["I1"].sex is None
    assert st.persons["I2"].full_name == "Third Three"
    assert st.skipped_ids == ["I1"]


def test_family_id_clashing_with_person_is_skipped():
    st = _state("""
0 @X1@ INDI
1 NAME A /B/
0 @X1@ FAM
1 HUSB @X1@
""")
    assert "X1" in st.persons
    assert "X1" not in st.families


def test_lines_without_open_record_are_ignored():
    st = _state("""
0 HEAD
1 SOUR Test
1 NAME Nobody /Here/
0 @I1@ INDI
1 NAME John /Doe/
0 @N1@ NOTE some note
1 SEX F
0 TRLR
1 SEX M
""")
    assert list(st.persons) == ["I1"]
    assert st.persons["I1"].sex is None


def test_level2_without_level1_is_ignored():
    st = _state("""
0 @I1@ INDI
2 DATE 1900
""")
    assert st.persons["I1"].birth_date is None


def test_deeper_levels_are_ignored():
    st = _state("""
0 @I1@ INDI
1 BIRT
2 DATE 1900
3 TIME 12:00
2 PLAC Paris
""")
    p = st.persons["I1"]
    assert p.birth_date == "1900"
    assert p.birth_place == "Paris"
