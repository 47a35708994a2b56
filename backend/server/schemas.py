from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PlayerLabel = Literal["user", "opponent"]


class CoordinateModel(BaseModel):
    row: int
    col: int

    def as_position(self) -> tuple[int, int]:
        return (self.row, self.col)


class MoveRequest(BaseModel):
    start: CoordinateModel
    end: CoordinateModel = Field(..., description="Landing square; captured pieces are inferred.")


class PlayerConfigPayload(BaseModel):
    type: Optional[Literal["human", "arbitrary"]] = None


class ConfigRequest(BaseModel):
    user: Optional[PlayerConfigPayload] = None
    opponent: Optional[PlayerConfigPayload] = None


class AIMoveRequest(BaseModel):
    player: Optional[PlayerLabel] = None
