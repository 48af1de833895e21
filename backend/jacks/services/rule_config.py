import logging
from enum import Enum
from typing import List, Optional, Tuple

from jacks.models import CalculatorSettings, RuleSet, StrategyDocument, SurrenderRule
from jacks.services.repository import StrategyRepository

logger = logging.getLogger(__name__)


class AdjustableOption(str, Enum):
    decks = "Number of Decks"
    soft_17 = "Soft 17 Dealer Action"
    double_after_split = "Allow Double After Split"
    surrender = "Allow Surrender"
    dealer_peek = "Dealer Peek"


ADJUSTABLE_OPTIONS = list(AdjustableOption)

SURRENDER_CYCLE = [
    SurrenderRule.not_allowed,
    SurrenderRule.any_upcard,
    SurrenderRule.dealer_2_through_10,
]


def clamp_index(index: int, delta: int, length: int) -> int:
    """Move a menu cursor by ``delta``; moves past either end are ignored."""
    target = index + delta
    if target < 0 or target >= length:
        return index
    return target


class RuleConfigurationController:
    """
    Holds the rule toggles of one calculator session and the strategy they select.

    Decks are clamped to the configured range. The surrender rule wraps around
    in both directions instead of stopping at the ends.
    """

    def __init__(self, repository: StrategyRepository, settings: CalculatorSettings) -> None:
        self.repository = repository
        self.settings = settings
        rules = settings.default_rules
        self.cursor = 0
        self.decks = rules.decks
        self.dealer_stands_on_soft_17 = rules.dealer_stands_on_soft_17
        self.double_after_split = rules.double_after_split
        self.surrender_allowed = rules.surrender_allowed
        self.dealer_peek = rules.dealer_peek
        self.active_key: Optional[str] = None
        self.active_document: Optional[StrategyDocument] = None
        self.exact_match = False
        self.refresh_strategy()

    @property
    def rules(self) -> RuleSet:
        return RuleSet(
            decks=self.decks,
            dealer_stands_on_soft_17=self.dealer_stands_on_soft_17,
            double_after_split=self.double_after_split,
            dealer_peek=self.dealer_peek,
            surrender_allowed=self.surrender_allowed,
        )

    @property
    def active_option(self) -> AdjustableOption:
        return ADJUSTABLE_OPTIONS[self.cursor]

    def move_cursor(self, delta: int) -> None:
        self.cursor = clamp_index(self.cursor, delta, len(ADJUSTABLE_OPTIONS))

    def adjust_active_option(self, delta: int) -> None:
        option = self.active_option
        if option is AdjustableOption.decks:
            decks = self.decks + delta
            if self.settings.min_decks <= decks <= self.settings.max_decks:
                self.decks = decks
        elif option is AdjustableOption.soft_17:
            self.dealer_stands_on_soft_17 = not self.dealer_stands_on_soft_17
        elif option is AdjustableOption.double_after_split:
            self.double_after_split = not self.double_after_split
        elif option is AdjustableOption.surrender:
            step = (delta > 0) - (delta < 0)
            index = SURRENDER_CYCLE.index(self.surrender_allowed)
            self.surrender_allowed = SURRENDER_CYCLE[(index + step) % len(SURRENDER_CYCLE)]
        elif option is AdjustableOption.dealer_peek:
            self.dealer_peek = not self.dealer_peek
        self.refresh_strategy()

    def refresh_strategy(self) -> None:
        rules = self.rules
        found = self.repository.match(rules, self.settings.fallback_key)
        if found is None:
            logger.warning("No strategy for %s and no fallback %r", rules.key(), self.settings.fallback_key)
            self.active_key, self.active_document, self.exact_match = None, None, False
            return
        if not found.exact:
            logger.info("No strategy for %s, using %s", rules.key(), found.key)
        self.active_key, self.active_document, self.exact_match = found.key, found.document, found.exact

    def option_value(self, option: AdjustableOption) -> str:
        if option is AdjustableOption.decks:
            return str(self.decks)
        if option is AdjustableOption.soft_17:
            return "Dealer Stands" if self.dealer_stands_on_soft_17 else "Dealer Hits"
        if option is AdjustableOption.double_after_split:
            return "Allowed" if self.double_after_split else "Not Allowed"
        if option is AdjustableOption.surrender:
            return self.surrender_allowed.value
        return "Yes" if self.dealer_peek else "No"

    def menu_entries(self) -> List[Tuple[str, str, bool]]:
        return [
            (option.value, self.option_value(option), index == self.cursor)
            for index, option in enumerate(ADJUSTABLE_OPTIONS)
        ]
