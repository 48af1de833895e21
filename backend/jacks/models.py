import uuid
from enum import Enum
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jacks.errors import UnknownActionCode

NIL_UUID = uuid.UUID(int=0)


class SurrenderRule(str, Enum):
    not_allowed = "Not Allowed"
    any_upcard = "Any Dealer Upcard"
    dealer_2_through_10 = "Dealer 2 through 10"


SURRENDER_KEYS = {
    SurrenderRule.not_allowed: "n",
    SurrenderRule.any_upcard: "any",
    SurrenderRule.dealer_2_through_10: "2to10",
}


class PlayerAction(str, Enum):
    hit = "H"
    stand = "S"
    double_or_hit = "D"
    double_or_stand = "Ds"
    split = "P"
    surrender_or_hit = "Su"
    surrender_or_stand = "Rs"
    split_or_hit = "Ph"

    @property
    def code(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return ACTION_DESCRIPTIONS[self]

    @classmethod
    def from_code(cls, code: str) -> "PlayerAction":
        try:
            return cls(code)
        except ValueError:
            raise UnknownActionCode(code) from None


ACTION_DESCRIPTIONS = {
    PlayerAction.hit: "Hit",
    PlayerAction.stand: "Stand",
    PlayerAction.double_or_hit: "Double if allowed, otherwise Hit",
    PlayerAction.double_or_stand: "Double if allowed, otherwise Stand",
    PlayerAction.split: "Split",
    PlayerAction.surrender_or_hit: "Surrender if allowed, otherwise Hit",
    PlayerAction.surrender_or_stand: "Surrender if allowed, otherwise Stand",
    PlayerAction.split_or_hit: "Split if double after split is allowed, otherwise Hit",
}


class HandCategory(str, Enum):
    hard = "hard"
    soft = "soft"
    pair = "pair"


class RuleSet(BaseModel):
    """The exact table rules a basic strategy was computed for."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    decks: int = Field(..., ge=1)
    dealer_stands_on_soft_17: bool
    double_after_split: bool
    dealer_peek: bool = Field(..., alias="dealer_peak")
    surrender_allowed: SurrenderRule

    def key(self) -> str:
        # e.g. decks2_s17n_dasy_peaky_surrn
        return "decks{}_s17{}_das{}_peak{}_surr{}".format(
            self.decks,
            "y" if self.dealer_stands_on_soft_17 else "n",
            "y" if self.double_after_split else "n",
            "y" if self.dealer_peek else "n",
            SURRENDER_KEYS[self.surrender_allowed],
        )


class HardHandRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=5, le=21)
    # index 0 = dealer 2, index 9 = dealer ace
    actions: List[str] = Field(..., min_length=10, max_length=10)


class SoftHandRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=13, le=21)  # ace (11) + the other card
    actions: List[str] = Field(..., min_length=10, max_length=10)


class PairRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    pair: int = Field(..., ge=2, le=11)  # 11 = pair of aces
    actions: List[str] = Field(..., min_length=10, max_length=10)


class StrategyTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    hard_hands: List[HardHandRow] = Field(default_factory=list)
    soft_hands: List[SoftHandRow] = Field(default_factory=list)
    pair_hands: List[PairRow] = Field(default_factory=list)


class StrategyDocument(BaseModel):
    """A complete basic strategy (no count-based deviations) for one rule set."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    description: str
    rules: RuleSet
    tables: StrategyTables
    action_legend: Dict[str, str] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def generate_missing_id(cls, v):
        if v is None:
            return uuid.uuid4()
        return v

    @field_validator("id")
    @classmethod
    def replace_nil_id(cls, v: uuid.UUID) -> uuid.UUID:
        # Any spelling of the nil UUID parses to the same value.
        if v == NIL_UUID:
            return uuid.uuid4()
        return v

    def describe(self, action: PlayerAction) -> str:
        return self.action_legend.get(action.code, action.description)


class CalculatorSettings(BaseModel):
    strategies_dir: Path
    fallback_key: str = "default-strategy"
    min_decks: int = Field(1, ge=1)
    max_decks: int = Field(6, ge=1)
    default_rules: RuleSet

    @model_validator(mode="after")
    def validate_deck_range(self) -> "CalculatorSettings":
        if self.max_decks < self.min_decks:
            raise ValueError("max_decks must be greater than or equal to min_decks")
        if not self.min_decks <= self.default_rules.decks <= self.max_decks:
            raise ValueError("default_rules.decks must lie within min_decks..max_decks")
        return self


class StrategySummary(BaseModel):
    key: str
    id: uuid.UUID
    name: str
    description: str
    rules: RuleSet


class ActionLookupResult(BaseModel):
    strategy_key: str
    exact_match: bool
    category: HandCategory
    total: int
    upcard: int
    code: str
    action: str
    description: str
