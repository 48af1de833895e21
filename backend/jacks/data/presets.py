from pathlib import Path

from jacks.models import CalculatorSettings, RuleSet, SurrenderRule

# Strategies shipped with the package, one JSON document per rule set.
STRATEGIES_DIR = Path(__file__).resolve().parent / "strategies"

# Served whenever the selected rules have no exact strategy.
FALLBACK_STRATEGY_KEY = "default-strategy"

MIN_DECKS = 1
MAX_DECKS = 6

# Single deck, S17, DAS, no surrender, dealer peeks.
DEFAULT_RULES = RuleSet(
    decks=1,
    dealer_stands_on_soft_17=True,
    double_after_split=True,
    dealer_peek=True,
    surrender_allowed=SurrenderRule.not_allowed,
)

DEFAULT_SETTINGS = CalculatorSettings(
    strategies_dir=STRATEGIES_DIR,
    fallback_key=FALLBACK_STRATEGY_KEY,
    min_decks=MIN_DECKS,
    max_decks=MAX_DECKS,
    default_rules=DEFAULT_RULES,
)
