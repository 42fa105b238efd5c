"""Rich rendering of classified failures and Graph payloads."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from rich.console import Console
from rich.table import Table

from .._failures import ClassifiedFailure

_BODY_PREVIEW = 500


def _format_value(value: Any) -> str:
    if value is None:
        return "-"
    if dataclasses.is_dataclass(value):
        return ", ".join(f"{k}={v!r}" for k, v in dataclasses.asdict(value).items())
    text = str(value)
    if len(text) > _BODY_PREVIEW:
        return text[:_BODY_PREVIEW] + "…"
    return text


def failure_table(failure: ClassifiedFailure) -> Table:
    """Build a two-column table describing a failure variant."""
    table = Table(title=f"✖ {failure.kind.value}", show_header=False, title_justify="left")
    table.add_column("field", style="bold red")
    table.add_column("value", overflow="fold")
    for field in dataclasses.fields(failure):
        table.add_row(field.name, _format_value(getattr(failure, field.name)))
    return table


def show_failure(failure: ClassifiedFailure, console: Console | None = None) -> None:
    (console or Console()).print(failure_table(failure))


def show_success(console: Console | None = None) -> None:
    (console or Console()).print("[green]✔ no error[/green]")


def show_payload(payload: Any, console: Console | None = None) -> None:
    (console or Console()).print_json(json.dumps(payload))
