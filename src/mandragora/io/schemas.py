# src/mandragora/io/schemas.py
# JSON-friendly (de)serialization of boards and analyses.
from __future__ import annotations
from typing import Any, Dict, List

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from mandragora.engine.board import (
    AREA_IDS, BASES, DEFAULT_ELIGIBILITY, ELIGIBILITY, PIECE_TYPES, Area, BoardState, Piece,
)

# ---------- Schemas ----------
class PieceSchema(Schema):
    class Meta: unknown = EXCLUDE
    # a missing type is tolerated: such a piece simply scores 0
    type = fields.String(load_default=None, allow_none=True,
                         validate=validate.OneOf(PIECE_TYPES))
    color = fields.String(load_default="White")
    first_player = fields.Integer(load_default=1, data_key="firstPlayer")
    second_player = fields.Integer(load_default=1, data_key="secondPlayer")

    @post_load
    def make(self, data, **kwargs) -> Piece:
        return Piece(**data)

class AreaSchema(Schema):
    class Meta: unknown = EXCLUDE
    id = fields.Integer(required=True, validate=validate.OneOf(AREA_IDS))
    allowed = fields.String(load_default=None, data_key="allowedPlayer",
                            validate=validate.OneOf(ELIGIBILITY))
    pieces = fields.List(fields.Nested(PieceSchema), load_default=list)

    @validates_schema
    def bases_hold_no_pieces(self, data, **kwargs):
        if data.get("id") in BASES and data.get("pieces"):
            raise ValidationError("base areas cannot hold pieces", "pieces")

    @post_load
    def make(self, data, **kwargs) -> Area:
        allowed = data.get("allowed") or DEFAULT_ELIGIBILITY[data["id"]]
        return Area(data["id"], allowed, tuple(data["pieces"]))

class BoardStateSchema(Schema):
    class Meta: unknown = EXCLUDE
    areas = fields.List(fields.Nested(AreaSchema), required=True)
    player_score = fields.List(fields.Nested(PieceSchema), load_default=list, data_key="playerScore")
    opponent_score = fields.List(fields.Nested(PieceSchema), load_default=list, data_key="opponentScore")
    player_goes_first = fields.Boolean(load_default=True, data_key="playerGoesFirst")

    @validates_schema
    def unique_areas(self, data, **kwargs):
        ids = [a.id for a in data.get("areas", [])]
        if len(ids) != len(set(ids)):
            raise ValidationError("duplicate area ids", "areas")

    @post_load
    def make(self, data, **kwargs) -> BoardState:
        given = {a.id: a for a in data["areas"]}
        areas = tuple(given.get(i) or Area(i, DEFAULT_ELIGIBILITY[i]) for i in AREA_IDS)
        return BoardState(
            areas=areas,
            player_score=tuple(data["player_score"]),
            opponent_score=tuple(data["opponent_score"]),
            player_goes_first=data["player_goes_first"],
        )

class MoveAnalysisSchema(Schema):
    area_id = fields.Integer(data_key="areaId")
    total_value = fields.Float(data_key="totalValue")
    explanation = fields.String()
    warning = fields.String(allow_none=True)
    factors = fields.Method("dump_factors")

    def dump_factors(self, obj) -> Dict[str, float]:
        return {k: v for k, v in obj.factors}
# -----------------------------

_board_schema = BoardStateSchema()
_analysis_schema = MoveAnalysisSchema()

def load_state(payload: Dict[str, Any]) -> BoardState:
    """Raises marshmallow.ValidationError on malformed input."""
    return _board_schema.load(payload)

def dump_state(state: BoardState) -> Dict[str, Any]:
    return _board_schema.dump(state)

def dump_analysis(analysis: List[Any]) -> List[Dict[str, Any]]:
    return _analysis_schema.dump(analysis, many=True)
