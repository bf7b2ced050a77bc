"""Helpers for invoking the farmghg CLI in tests."""

from __future__ import annotations

import re
from typing import Any

from typer.testing import CliRunner

from farmghg.cli.main import app

_ESCAPE_SEQUENCE = re.compile(r"\x1B\[[0-9;?]*[ -/]*[@-~]")


def invoke(*args: str) -> Any:
    """Run ``farmghg`` with ``args`` and return the click result."""

    return CliRunner().invoke(app, list(args), env={"COLUMNS": "200"})


def cli_text(result: Any) -> str:
    """Return stdout of ``result`` with rich styling removed."""

    raw = result.stdout_bytes.decode("utf-8", errors="replace") if result.stdout_bytes else ""
    return _ESCAPE_SEQUENCE.sub("", raw or result.output)


__all__ = ["cli_text", "invoke"]
