"""Drawing Instructions

Absolute-positioned drawing commands emitted by the layout and consumed by a
PdfService. Coordinates are points with the origin at the top-left corner.
"""

from typing import Literal, Optional, Union
from pydantic import BaseModel, Field


class _Instruction(BaseModel):
    class Config:
        frozen = True


class SetFillColor(_Instruction):
    """Set the text fill color"""

    color: str = Field(description="Hex color (e.g., #444444)")


class SetStrokeColor(_Instruction):
    """Set the line stroke color"""

    color: str = Field(description="Hex color (e.g., #aaaaaa)")


class SetLineWidth(_Instruction):
    width: float = Field(gt=0)


class SetFont(_Instruction):
    """Set font face (weight is part of the name, e.g. Helvetica-Bold)"""

    name: str


class SetFontSize(_Instruction):
    size: float = Field(gt=0)


class DrawText(_Instruction):
    """
    Draw a line of text with its top edge at y

    width/align place the text inside the box [x, x + width];
    left-aligned text ignores width.
    """

    text: str
    x: float
    y: float
    width: Optional[float] = None
    align: Literal["left", "right", "center"] = "left"


class DrawLine(_Instruction):
    """Stroke a straight line between two points"""

    x1: float
    y1: float
    x2: float
    y2: float


class MoveDown(_Instruction):
    """Advance the text cursor by a number of lines"""

    lines: int = 1


Instruction = Union[
    SetFillColor,
    SetStrokeColor,
    SetLineWidth,
    SetFont,
    SetFontSize,
    DrawText,
    DrawLine,
    MoveDown,
]
