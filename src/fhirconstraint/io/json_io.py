"""JSON read/write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from fhirconstraint.exceptions import BatchParseError


def load_json_file(path: Path) -> str:
    """Read a JSON document from disk as text, leaving decoding to the caller."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BatchParseError(f"Failed to read batch file {path}: {exc}") from exc


def dump_payload(payload: object) -> str:
    """Serialize a result payload; engine values JSON can't encode are stringified."""
    return json.dumps(payload, indent=2, default=str)


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(dump_payload(payload))
            handle.write("\n")
        os.replace(temp_name, path)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
