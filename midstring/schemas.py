from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from . import __version__
from .config import MAX_KEY_LENGTH

KEY_PATTERN = r"^[a-z]*$"


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str = __version__


class MidStringIn(BaseModel):
    prev: Optional[str] = Field(default=None, max_length=MAX_KEY_LENGTH, pattern=KEY_PATTERN)
    next: Optional[str] = Field(default=None, max_length=MAX_KEY_LENGTH, pattern=KEY_PATTERN)


class MidStringOut(BaseModel):
    prev: Optional[str]
    next: Optional[str]
    mid: str
