"""Formatter layer: ActionResponse to JSON or human text.

The CLI renders responses for humans (Rich tables and key-value lines) or
machines (``--json``).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from emprecords.output.renderers import render_response

if TYPE_CHECKING:
    from emprecords.actions.base import ActionResponse


def format_response(response: ActionResponse, *, json_output: bool = False) -> str:
    """Format an ActionResponse for display.

    Args:
        response: The action response to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return _json.dumps(
            {"status_code": response.status_code, "body": response.body},
            indent=2,
            default=str,
        )
    return render_response(response)
