"""Action layer — plain async functions returning ``ActionResponse``.

Actions never validate; the validation pipeline runs before each one.
"""

from emprecords.actions.base import ActionRequest, ActionResponse, respond

__all__ = ["ActionRequest", "ActionResponse", "respond"]
