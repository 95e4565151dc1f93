"""Status bar line resolution endpoint."""
from __future__ import annotations
from fastapi import APIRouter

from ...status.message import StatusInputs, StatusLine, resolve_status_line

router = APIRouter()


@router.post("", response_model=StatusLine | None)
async def status_line(body: StatusInputs):
    """The single line to show, or ``null`` when nothing applies."""
    return resolve_status_line(body)
