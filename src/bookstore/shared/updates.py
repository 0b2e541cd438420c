"""Partial-update plumbing for ``Update*`` commands.

Command fields left unset arrive as ``None``. A field the caller wants
cleared is named in the command's ``cleared_fields`` JSON list.
"""

import json


def collect_changes(command, fields, cleared_fields=None) -> dict:
    changes = {}
    for field in fields:
        value = getattr(command, field, None)
        if value is not None:
            changes[field] = value

    for field in json.loads(cleared_fields) if cleared_fields else []:
        if field in fields:
            changes[field] = None
    return changes
