"""Rich renderers for ActionResponse bodies.

Bodies with an ``items`` list render as a table, bodies with a ``benefits``
list render as the employee's benefit table, anything else as key-value
lines. Error bodies render as one ``ERROR`` line, plus one line per field
message for validation failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from emprecords.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from emprecords.actions.base import ActionResponse

_SKIP_COLUMNS = {"created_by", "modified_by", "social_security_number"}
_MONEY_COLUMNS = {"base_cost", "cost_override", "effective_cost"}


def render_response(response: ActionResponse) -> str:
    """Render *response* to a string via Rich."""
    console = create_console()
    if response.ok:
        _render_ok(response, console)
    else:
        _render_error(response, console)
    return get_output(console).rstrip("\n")


def _render_ok(response: ActionResponse, console: Console) -> None:
    status = Text(f"  {response.status_code}", style="emp.status")
    console.print(Text("OK", style="emp.ok"), status)
    body = response.body
    if not isinstance(body, dict):
        return
    if isinstance(body.get("items"), list):
        _render_table(body["items"], console)
    elif isinstance(body.get("benefits"), list):
        console.print(Text(f"Employee {body.get('employee_id')}", style="emp.id"))
        _render_table(body["benefits"], console)
    else:
        _render_fields(body, console)
    for warning in body.get("warnings", []):
        console.print(Text("WARNING", style="emp.warning"), Text(warning))


def _render_table(rows: list[dict[str, Any]], console: Console) -> None:
    if not rows:
        console.print("  (none)")
        return
    columns = [name for name in rows[0] if name not in _SKIP_COLUMNS]
    table = Table(show_header=True, header_style="bold")
    for name in columns:
        table.add_column(name, style="emp.money" if name in _MONEY_COLUMNS else None)
    for row in rows:
        cells = ("" if row.get(name) is None else str(row.get(name)) for name in columns)
        table.add_row(*(Text(cell) for cell in cells))
    console.print(table)


def _render_fields(body: dict[str, Any], console: Console) -> None:
    for key, value in body.items():
        if key in ("meta", "warnings"):
            continue
        console.print(Text(f"  {key}:", style="emp.key"), Text(str(value)))


def _render_error(response: ActionResponse, console: Console) -> None:
    status = Text(f"  {response.status_code}", style="emp.status")
    console.print(Text("ERROR", style="emp.error"), status)
    body = response.body
    if not isinstance(body, dict):
        return
    if "message" in body and "code" in body:
        console.print(Text(f"  {body['message']}"))
        return
    # Validation failure: field -> messages
    for field_name, messages in body.items():
        for message in messages:
            console.print(Text(f"  {field_name}:", style="emp.key"), Text(message))
