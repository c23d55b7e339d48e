"""Simple configuration loader for gedcom_analyzer.

Behavior:
- Load defaults.
- If environment variable `GEDCOM_ANALYZER_CONFIG` is set (or a path is
  passed), load that JSON file and merge.
- Environment variables override file values (variables:
  GEDCOM_ANALYZER_ENCODING, GEDCOM_ANALYZER_MAX_COUSIN_DEGREE,
  GEDCOM_ANALYZER_TEMPLATES_DIR, GEDCOM_ANALYZER_LOG_LEVEL,
  GEDCOM_ANALYZER_OUTPUT_ENCODING).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import os
import json
import logging
from typing import Optional

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass
class Config:
    encoding: str = "utf-8-sig"
    max_cousin_degree: int = 6
    templates_dir: Path = field(default_factory=lambda: PACKAGE_TEMPLATES_DIR)
    log_level: str = "WARNING"
    output_encoding: str = "utf-8"


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return None


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_level(value, default: str) -> str:
    # only names of real logging levels, not other attributes of the module
    name = str(value).upper()
    if isinstance(getattr(logging, name, None), int):
        return name
    return default


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `GEDCOM_ANALYZER_CONFIG` if set.
    """
    cfg = Config()

    cp = config_path or os.environ.get("GEDCOM_ANALYZER_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            if data.get("encoding"):
                cfg.encoding = str(data["encoding"])
            if "max_cousin_degree" in data:
                cfg.max_cousin_degree = _as_int(data["max_cousin_degree"], cfg.max_cousin_degree)
            if data.get("templates_dir"):
                cfg.templates_dir = Path(data["templates_dir"])
            if data.get("log_level"):
                cfg.log_level = _as_level(data["log_level"], cfg.log_level)
            if data.get("output_encoding"):
                cfg.output_encoding = str(data["output_encoding"])

    # An explicit config_path is authoritative: environment variables only
    # apply when the caller did not pass one.
    if config_path is None:
        if os.environ.get("GEDCOM_ANALYZER_ENCODING"):
            cfg.encoding = os.environ["GEDCOM_ANALYZER_ENCODING"]
        if os.environ.get("GEDCOM_ANALYZER_MAX_COUSIN_DEGREE"):
            cfg.max_cousin_degree = _as_int(os.environ["GEDCOM_ANALYZER_MAX_COUSIN_DEGREE"], cfg.max_cousin_degree)
        if os.environ.get("GEDCOM_ANALYZER_TEMPLATES_DIR"):
            cfg.templates_dir = Path(os.environ["GEDCOM_ANALYZER_TEMPLATES_DIR"])
        if os.environ.get("GEDCOM_ANALYZER_LOG_LEVEL"):
            cfg.log_level = _as_level(os.environ["GEDCOM_ANALYZER_LOG_LEVEL"], cfg.log_level)
        if os.environ.get("GEDCOM_ANALYZER_OUTPUT_ENCODING"):
            cfg.output_encoding = os.environ["GEDCOM_ANALYZER_OUTPUT_ENCODING"]

    if cfg.max_cousin_degree < 1:
        cfg.max_cousin_degree = 1
    return cfg
