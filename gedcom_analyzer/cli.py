"""Command-line entry point: relationship report for one person.

Usage examples:

gedcom-analyzer family.ged I1
gedcom-analyzer "family1.ged,family2.ged" @I1@
gedcom-analyzer family.ged I1 out/report.html

"""
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from .builder import parse_and_merge
from .config import load_config
from .fs import write_report
from .models import PersonNotFoundError
from .report import build_context, render_html, render_text


def _strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value.strip()


def split_sources(raw: str) -> List[str]:
    """Split a comma-separated list of GEDCOM paths, dropping quotes."""
    cleaned = _strip_quotes(raw)
    return [p for p in (_strip_quotes(part) for part in cleaned.split(",")) if p]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gedcom-analyzer", description="Family relationship analysis of GEDCOM files")
    p.add_argument("sources", help="GEDCOM file, or comma-separated list of files (earlier files win on duplicate ids)")
    p.add_argument("person_id", help="ID of the person to analyze (with or without @ symbols)")
    p.add_argument("html_out", nargs="?", help="Optional path of an HTML report to write")
    p.add_argument("--config", help="JSON configuration file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log parsing progress")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    level = logging.INFO if args.verbose else getattr(logging, cfg.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    sources = split_sources(args.sources)
    try:
        dataset = parse_and_merge(sources, encoding=cfg.encoding)
    except OSError as exc:
        print(f"Error: cannot read GEDCOM source: {exc}", file=sys.stderr)
        return 2

    try:
        person = dataset.require_person(args.person_id)
    except PersonNotFoundError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return 1

    ctx = build_context(dataset, person, max_cousin_degree=cfg.max_cousin_degree, sources=sources)
    if args.html_out:
        out = Path(args.html_out)
        html = render_html(ctx, cfg.templates_dir, charset=cfg.output_encoding)
        write_report(out, html, encoding=cfg.output_encoding)
        print(f"HTML output written to: {out}")
    else:
        sys.stdout.write(render_text(ctx, cfg.templates_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
