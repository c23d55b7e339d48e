"""Text and HTML relationship reports rendered with Jinja2 templates."""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import PACKAGE_TEMPLATES_DIR
from .cousins import ancestor_generation_label, descendant_generation_label, ordinal
from .models import Dataset, Person
from .relationship import (
    MAX_COUSIN_DEGREE,
    ancestors_by_generation,
    cousins_grouped_by_family,
    descendants_by_generation,
    siblings,
)


def get_env(templates_dir: str | Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(templates_dir: str | Path, template_name: str, ctx: Dict[str, Any]) -> str:
    env = get_env(templates_dir)
    tmpl = env.get_template(template_name)
    return tmpl.render(**ctx)


def _generations(by_gen: Dict[int, List[Person]], label) -> List[Dict[str, Any]]:
    return [{"label": label(gen), "persons": by_gen[gen]} for gen in sorted(by_gen)]


def build_context(dataset: Dataset, person: Person, max_cousin_degree: int = MAX_COUSIN_DEGREE,
                  sources: Optional[List[str]] = None) -> Dict[str, Any]:
    """Run the relationship queries for `person` and collect report data."""
    cousin_sections = []
    for degree in range(1, max_cousin_degree + 1):
        grouped = cousins_grouped_by_family(person, degree)
        if not grouped:
            continue
        groups = []
        for family_id, members in grouped.items():
            family = dataset.get_family(family_id)
            groups.append({
                "family_id": family_id,
                "family_name": family.display_name if family else f"Family {family_id}",
                "persons": members,
            })
        cousin_sections.append({
            "degree": degree,
            "label": ordinal(degree),
            "total": sum(len(g["persons"]) for g in groups),
            "groups": groups,
        })
    return {
        "person": person,
        "sources": sources or [],
        "person_count": dataset.person_count,
        "family_count": dataset.family_count,
        "ancestors": _generations(ancestors_by_generation(person), ancestor_generation_label),
        "descendants": _generations(descendants_by_generation(person), descendant_generation_label),
        "siblings": siblings(person),
        "cousins": cousin_sections,
    }


def render_text(ctx: Dict[str, Any], templates_dir: Optional[str | Path] = None) -> str:
    return render_template(templates_dir or PACKAGE_TEMPLATES_DIR, "report.txt", ctx)


def render_html(ctx: Dict[str, Any], templates_dir: Optional[str | Path] = None, charset: str = "utf-8") -> str:
    return render_template(templates_dir or PACKAGE_TEMPLATES_DIR, "report.html", dict(ctx, charset=charset))
