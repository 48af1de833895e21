import json

import pytest

from jacks.models import CalculatorSettings, RuleSet, StrategyDocument, SurrenderRule

HARD_10 = ["D", "D", "D", "D", "D", "D", "D", "D", "H", "H"]
HARD_16 = ["S", "S", "S", "S", "S", "H", "H", "H", "H", "H"]
SOFT_18 = ["S", "Ds", "Ds", "Ds", "Ds", "S", "S", "H", "H", "S"]
PAIR_7 = ["P", "P", "P", "P", "P", "P", "P", "H", "S", "H"]
PAIR_ACES = ["P"] * 10


@pytest.fixture
def make_strategy():
    """Build the JSON-ready dict of a small strategy document."""

    def _make(
        decks=2,
        dealer_stands_on_soft_17=False,
        double_after_split=True,
        dealer_peak=True,
        surrender_allowed="Not Allowed",
        **fields,
    ):
        data = {
            "id": "00000000-0000-0000-0000-000000000000",
            "name": "Test Strategy",
            "description": "For Testing",
            "rules": {
                "decks": decks,
                "dealer_stands_on_soft_17": dealer_stands_on_soft_17,
                "double_after_split": double_after_split,
                "dealer_peak": dealer_peak,
                "surrender_allowed": surrender_allowed,
            },
            "tables": {
                "hard_hands": [{"total": 10, "actions": HARD_10}, {"total": 16, "actions": HARD_16}],
                "soft_hands": [{"total": 18, "actions": SOFT_18}],
                "pair_hands": [{"pair": 7, "actions": PAIR_7}, {"pair": 11, "actions": PAIR_ACES}],
            },
            "action_legend": {"H": "Hit", "S": "Stand", "D": "Double if allowed, otherwise Hit", "P": "Split"},
        }
        data.update(fields)
        return data

    return _make


@pytest.fixture
def document(make_strategy) -> StrategyDocument:
    return StrategyDocument.model_validate(make_strategy())


@pytest.fixture
def write_strategy(tmp_path):
    def _write(filename, data):
        path = tmp_path / filename
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(tmp_path) -> CalculatorSettings:
    return CalculatorSettings(
        strategies_dir=tmp_path,
        fallback_key="default-strategy",
        min_decks=1,
        max_decks=6,
        default_rules=RuleSet(
            decks=1,
            dealer_stands_on_soft_17=True,
            double_after_split=True,
            dealer_peek=True,
            surrender_allowed=SurrenderRule.not_allowed,
        ),
    )
