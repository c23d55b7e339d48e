"""Writing rendered reports to disk."""
from __future__ import annotations
from pathlib import Path
import tempfile
import os

DEFAULT_OUTPUT_ENCODING = "utf-8"


def write_report(path: str | Path, text: str, encoding: str = DEFAULT_OUTPUT_ENCODING) -> Path:
    """Write a rendered report so readers never see a partial file.

    The text goes to a sibling temp file that then replaces `path`. Missing
    parent directories are created. Characters the output encoding cannot
    represent (names in non-Latin scripts written as latin-1, say) become
    numeric character references, which browsers render unchanged.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", encoding=encoding, errors="xmlcharrefreplace",
                                     dir=target.parent, prefix=f".{target.name}.",
                                     suffix=".part", delete=False) as f:
        f.write(text)
        tmp = Path(f.name)
    try:
        os.replace(tmp, target)
    except OSError:
        tmp.unlink()
        raise
    return target
