from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Optional[Path], output: Optional[str]) -> Optional[Path]:
    if not output:
        return None
    out_path = Path(output)
    if out_path.is_dir():
        stem = input_path.stem if input_path else "blocks"
        out_path = out_path / f"{stem}.json"
    return out_path


def read_text(path: Optional[Path]) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def dump_blocks(blocks: list[dict[str, Any]], wrap_payload: bool = False, indent: Optional[int] = 2) -> str:
    payload: Any = {"blocks": blocks} if wrap_payload else blocks
    return json.dumps(payload, ensure_ascii=False, indent=indent)
