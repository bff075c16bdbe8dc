"""Panel response envelope."""

from typing import Any

from pydantic import BaseModel


def envelope(payload: BaseModel) -> dict[str, Any]:
    """``{"success": true, "data": {...}, ...}``.

    The payload is both nested under ``data`` and spread at the top level:
    older frontend builds read the flat keys, newer ones read ``data``.
    """
    data = payload.model_dump(mode="json", by_alias=True)
    return {"success": True, "data": data, **data}
