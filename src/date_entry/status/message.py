"""Status bar message selection.

Exactly one line is shown; the first matching condition wins:
warming up > query running/cancelling > exporting > last export result >
status message > execution time > warm-up time.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel


class Tone(StrEnum):
    WARNING = "warning"
    PRIMARY = "primary"
    SUCCESS = "success"
    ERROR = "error"
    SECONDARY = "secondary"


class ExportMessage(BaseModel):
    text: str
    type: Literal["success", "error", "info"]


class StatusInputs(BaseModel):
    warming_up: bool = False
    query_loading: bool = False
    query_cancelling: bool = False
    is_exporting: bool = False

    status_message: str | None = None
    export_status_message: str | None = None
    last_export_message: ExportMessage | None = None

    execution_time: float | None = None
    warming_up_time: float | None = None


class StatusLine(BaseModel):
    text: str
    tone: Tone


EXPORT_TONES = {
    "error": Tone.ERROR,
    "success": Tone.SECONDARY,
    "info": Tone.PRIMARY,
}


def resolve_status_line(inputs: StatusInputs) -> StatusLine | None:
    if inputs.warming_up:
        return StatusLine(text="Carregando estatísticas dos conjuntos de dados...", tone=Tone.WARNING)
    if inputs.query_loading:
        text = "Cancelando consulta..." if inputs.query_cancelling else "Executando consulta..."
        return StatusLine(text=text, tone=Tone.PRIMARY)
    if inputs.is_exporting:
        return StatusLine(text=inputs.export_status_message or "Exportando...", tone=Tone.SUCCESS)
    if inputs.last_export_message is not None:
        msg = inputs.last_export_message
        return StatusLine(text=msg.text, tone=EXPORT_TONES[msg.type])
    if inputs.status_message:
        return StatusLine(text=inputs.status_message, tone=Tone.SECONDARY)
    # Zero times are treated as "not measured"
    if inputs.execution_time:
        return StatusLine(text=f"Tempo: {inputs.execution_time:.2f}ms", tone=Tone.SECONDARY)
    if inputs.warming_up_time:
        return StatusLine(text=f"Estatísticas carregadas em {inputs.warming_up_time:.2f}ms", tone=Tone.SECONDARY)
    return None
