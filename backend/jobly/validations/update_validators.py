"""
update_validators.py
- Purpose: Guard partial-update payloads before any SQL is built.
- Design: Only whitelisted fields reach the fragment builder, in a fixed order,
  so identity columns (handle, id, companyHandle) can never be rewritten and
  the generated SET clause is the same for the same payload.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from jobly.core.errors import bad_request


def restrict_update_fields(data: Mapping[str, Any] | None, allowed: Sequence[str]) -> dict[str, Any]:
    data = data or {}
    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise bad_request(
            f"Cannot update field(s): {', '.join(unknown)}",
            details={"fields": unknown, "allowed": list(allowed)},
        )
    return {key: data[key] for key in allowed if key in data}
