import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from gedcom_analyzer.builder import parse  # noqa: E402


# G1 + G2 -> C1 ; C1 + S1 -> D1, D2
LINEAGE_GED = """
0 HEAD
1 CHAR UTF-8
0 @G1@ INDI
1 NAME George /Elder/
1 SEX M
1 BIRT
2 DATE 1 JAN 1900
2 PLAC Springfield
1 DEAT
2 DATE 1970
1 FAMS @F1@
0 @G2@ INDI
1 NAME Grace /Older/
1 SEX F
1 FAMS @F1@
0 @C1@ INDI
1 NAME Carl /Elder/
1 SEX M
1 FAMC @F1@
1 FAMS @F2@
0 @S1@ INDI
1 NAME Sue /Spouse/
1 SEX F
1 FAMS @F2@
0 @D1@ INDI
1 NAME Dan /Elder/
1 FAMC @F2@
0 @D2@ INDI
1 NAME Dora /Elder/
1 FAMC @F2@
0 @F1@ FAM
1 HUSB @G1@
1 WIFE @G2@
1 CHIL @C1@
1 MARR
2 DATE 5 MAY 1925
2 PLAC Shelbyville
0 @F2@ FAM
1 HUSB @C1@
1 WIFE @S1@
1 CHIL @D1@
1 CHIL @D2@
0 TRLR
"""

# GG1 + GG2 -> A, B ; A + AW -> X ; B + BW -> Y ; X + XW -> X2 ; Y + YW -> Y2
COUSINS_GED = """
0 @GG1@ INDI
1 NAME Abe /Root/
1 FAMS @F10@
0 @GG2@ INDI
1 NAME Ada /Root/
1 FAMS @F10@
0 @A@ INDI
1 NAME Al /Root/
1 FAMC @F10@
1 FAMS @F11@
0 @B@ INDI
1 NAME Bea /Root/
1 FAMC @F10@
1 FAMS @F12@
0 @AW@ INDI
1 NAME Ann /Inlaw/
1 FAMS @F11@
0 @BW@ INDI
1 NAME Bob /Inlaw/
1 FAMS @F12@
0 @X@ INDI
1 NAME Xavier /Root/
1 FAMC @F11@
1 FAMS @F13@
0 @Y@ INDI
1 NAME Yvonne /Inlaw/
1 FAMC @F12@
1 FAMS @F14@
0 @XW@ INDI
1 NAME Xena /Other/
1 FAMS @F13@
0 @YW@ INDI
1 NAME Yuri /Other/
1 FAMS @F14@
0 @X2@ INDI
1 NAME Xander /Root/
1 FAMC @F13@
0 @Y2@ INDI
1 NAME Yara /Other/
1 FAMC @F14@
0 @F10@ FAM
1 HUSB @GG1@
1 WIFE @GG2@
1 CHIL @A@
1 CHIL @B@
0 @F11@ FAM
1 HUSB @A@
1 WIFE @AW@
1 CHIL @X@
0 @F12@ FAM
1 HUSB @BW@
1 WIFE @B@
1 CHIL @Y@
0 @F13@ FAM
1 HUSB @X@
1 WIFE @XW@
1 CHIL @X2@
0 @F14@ FAM
1 HUSB @YW@
1 WIFE @Y@
1 CHIL @Y2@
"""


def parse_text(text: str):
    return parse(text.strip().splitlines())


@pytest.fixture
def lineage():
    return parse_text(LINEAGE_GED)


@pytest.fixture
def cousin_tree():
    return parse_text(COUSINS_GED)
