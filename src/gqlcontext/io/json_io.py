"""Atomic JSON writes for trace reports."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from gqlcontext.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def write_json_atomic(path: Path, payload: object) -> None:
    """Write *payload* next to *path* in a temp file, then rename it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=REPORT_TEMP_PREFIX,
            suffix=REPORT_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2)
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    os.replace(temp_name, path)
