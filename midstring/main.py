import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from . import __version__
from .config import LOG_LEVEL, MAX_KEY_LENGTH
from .core import mid_string
from .schemas import KEY_PATTERN, Health, MidStringIn, MidStringOut, Version

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

app = FastAPI(title="Midstring API", version=__version__)


# === Helpers ===


def check_range(prev: Optional[str], next: Optional[str]) -> None:
    # an empty next is open, anything sorts below it
    if not next:
        return
    prev = prev or ""
    if prev >= next:
        raise HTTPException(status_code=409, detail="invalid_range")
    # nothing sorts between a key and the same key followed by a's
    if next.startswith(prev) and not next[len(prev):].strip("a"):
        raise HTTPException(status_code=409, detail="invalid_range")


def midstring_out(prev: Optional[str], next: Optional[str]) -> MidStringOut:
    check_range(prev, next)
    mid = mid_string(prev, next)
    logger.debug("mid_string(%r, %r) -> %r", prev, next, mid)
    return MidStringOut(prev=prev, next=next, mid=mid)


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version()


# === Key endpoints ===


@app.post("/v1/midstring", response_model=MidStringOut)
def create_midstring(payload: MidStringIn):
    return midstring_out(payload.prev, payload.next)


@app.get("/v1/midstring", response_model=MidStringOut)
def get_midstring(
    prev: Optional[str] = Query(default=None, max_length=MAX_KEY_LENGTH, pattern=KEY_PATTERN),
    next: Optional[str] = Query(default=None, max_length=MAX_KEY_LENGTH, pattern=KEY_PATTERN),
):
    return midstring_out(prev, next)
