"""Small example script that demonstrates the relationship queries.

Parses a tiny inline GEDCOM tree and prints:
 - ancestors grouped by generation for the youngest person
 - first and second cousins
 - the relationship classification between a few pairs

Run:
    python scripts/example_relationships.py
"""
from pathlib import Path
import sys

# Ensure repo root is on sys.path when running this script directly
repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from gedcom_analyzer.builder import parse
from gedcom_analyzer.cousins import ancestor_generation_label, relationship_label
from gedcom_analyzer.relationship import ancestors_by_generation, cousins, relationship_degree

DEMO = """
0 @GP@ INDI
1 NAME Gus /Root/
1 FAMS @F1@
0 @A@ INDI
1 NAME Ann /Root/
1 FAMC @F1@
1 FAMS @F2@
0 @B@ INDI
1 NAME Ben /Root/
1 FAMC @F1@
1 FAMS @F3@
0 @X@ INDI
1 NAME Xia /Lee/
1 FAMC @F2@
1 FAMS @F4@
0 @Y@ INDI
1 NAME Yan /Root/
1 FAMC @F3@
1 FAMS @F5@
0 @X2@ INDI
1 NAME Xu /Lee/
1 FAMC @F4@
0 @Y2@ INDI
1 NAME Yoko /Root/
1 FAMC @F5@
0 @F1@ FAM
1 HUSB @GP@
1 CHIL @A@
1 CHIL @B@
0 @F2@ FAM
1 WIFE @A@
1 CHIL @X@
0 @F3@ FAM
1 HUSB @B@
1 CHIL @Y@
0 @F4@ FAM
1 WIFE @X@
1 CHIL @X2@
0 @F5@ FAM
1 HUSB @Y@
1 CHIL @Y2@
"""


def main():
    ds = parse(DEMO.strip().splitlines())
    x2 = ds.require_person("X2")

    print(f"Ancestors of {x2.display_name}:")
    for gen, people in sorted(ancestors_by_generation(x2).items()):
        names = ", ".join(p.display_name for p in people)
        print(f"  {ancestor_generation_label(gen)}: {names}")

    for degree in (1, 2):
        found = sorted(p.display_name for p in cousins(x2, degree))
        print(f"\nDegree {degree} cousins of {x2.display_name}: {found or 'none'}")

    print("\nRelationships:")
    for a_id, b_id in (("A", "B"), ("X", "Y"), ("X2", "Y2"), ("X2", "GP"), ("X2", "Y")):
        a, b = ds.require_person(a_id), ds.require_person(b_id)
        code = relationship_degree(a, b)
        print(f"  {a.display_name} -> {b.display_name}: {relationship_label(code)} ({code})")


if __name__ == "__main__":
    main()
