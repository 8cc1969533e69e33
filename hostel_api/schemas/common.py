# hostel_api/schemas/common.py
"""Field types shared by the request schemas.

Admin forms post amounts as strings and leave untouched inputs empty, so
numeric fields accept ``""``/``None`` as 0 and text fields accept ``None``
as an empty string and numbers as their string form.
"""
from typing import Annotated, Any
from pydantic import BaseModel, BeforeValidator


def _blank_to_zero(v: Any) -> Any:
    """Whole units only: fractional amounts are truncated toward zero"""
    if v is None:
        return 0
    if isinstance(v, float):
        return int(v) if v == v and abs(v) != float("inf") else v
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return 0
        try:
            return int(v)
        except ValueError:
            pass
        try:
            return int(float(v))
        except (ValueError, OverflowError):
            return v
    return v


def _none_to_empty(v: Any) -> Any:
    if v is None:
        return ""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


Amount = Annotated[int, BeforeValidator(_blank_to_zero)]
Text = Annotated[str, BeforeValidator(_none_to_empty)]


class ORMModel(BaseModel):
    model_config = {"from_attributes": True}
