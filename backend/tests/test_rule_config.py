import pytest

from jacks.models import SurrenderRule
from jacks.services.repository import StrategyRepository
from jacks.services.rule_config import ADJUSTABLE_OPTIONS, AdjustableOption, RuleConfigurationController, clamp_index


@pytest.fixture
def controller(make_strategy, write_strategy, settings):
    write_strategy("default-strategy.json", make_strategy(decks=2, name="Default"))
    write_strategy("single-deck.json", make_strategy(decks=1, dealer_stands_on_soft_17=True, name="Single Deck"))
    write_strategy(
        "single-deck-surrender.json",
        make_strategy(decks=1, dealer_stands_on_soft_17=True, surrender_allowed="Any Dealer Upcard", name="Surrender"),
    )
    return RuleConfigurationController(StrategyRepository.build(settings.strategies_dir), settings)


def _select(controller, option):
    controller.cursor = ADJUSTABLE_OPTIONS.index(option)


def test_starts_from_default_rules(controller, settings):
    assert controller.rules == settings.default_rules
    assert controller.cursor == 0
    assert controller.active_key == "single-deck"
    assert controller.exact_match is True


def test_cursor_clamps_at_both_ends(controller):
    controller.move_cursor(-1)
    assert controller.cursor == 0
    for _ in range(10):
        controller.move_cursor(1)
    assert controller.cursor == len(ADJUSTABLE_OPTIONS) - 1
    assert controller.active_option is AdjustableOption.dealer_peek
    controller.move_cursor(1)
    assert controller.cursor == len(ADJUSTABLE_OPTIONS) - 1


def test_clamp_index():
    assert clamp_index(0, -1, 3) == 0
    assert clamp_index(2, 1, 3) == 2
    assert clamp_index(1, 1, 3) == 2


def test_decks_clamp_without_error(controller):
    controller.adjust_active_option(-1)
    assert controller.decks == 1
    for _ in range(10):
        controller.adjust_active_option(1)
    assert controller.decks == 6


def test_boolean_options_flip_on_any_delta(controller):
    _select(controller, AdjustableOption.soft_17)
    controller.adjust_active_option(1)
    assert controller.dealer_stands_on_soft_17 is False
    controller.adjust_active_option(1)
    assert controller.dealer_stands_on_soft_17 is True

    _select(controller, AdjustableOption.double_after_split)
    controller.adjust_active_option(-1)
    assert controller.double_after_split is False

    _select(controller, AdjustableOption.dealer_peek)
    controller.adjust_active_option(-1)
    assert controller.dealer_peek is False


def test_surrender_cycles_and_wraps(controller):
    _select(controller, AdjustableOption.surrender)
    controller.adjust_active_option(1)
    assert controller.surrender_allowed is SurrenderRule.any_upcard
    controller.adjust_active_option(1)
    assert controller.surrender_allowed is SurrenderRule.dealer_2_through_10
    controller.adjust_active_option(1)
    assert controller.surrender_allowed is SurrenderRule.not_allowed
    controller.adjust_active_option(-1)
    assert controller.surrender_allowed is SurrenderRule.dealer_2_through_10


def test_adjusting_reresolves_strategy(controller):
    _select(controller, AdjustableOption.surrender)
    controller.adjust_active_option(1)
    assert controller.active_key == "single-deck-surrender"
    assert controller.active_document.name == "Surrender"
    assert controller.exact_match is True

    controller.adjust_active_option(1)  # dealer 2 through 10, no chart for it
    assert controller.active_key == "default-strategy"
    assert controller.active_document.name == "Default"
    assert controller.exact_match is False


def test_no_strategy_at_all(settings):
    controller = RuleConfigurationController(StrategyRepository(), settings)
    assert controller.active_document is None
    assert controller.active_key is None
    controller.adjust_active_option(1)
    assert controller.decks == 2
    assert controller.active_document is None


def test_menu_entries(controller):
    entries = controller.menu_entries()
    assert entries[0] == ("Number of Decks", "1", True)
    assert entries[1] == ("Soft 17 Dealer Action", "Dealer Stands", False)
    assert entries[2] == ("Allow Double After Split", "Allowed", False)
    assert entries[3] == ("Allow Surrender", "Not Allowed", False)
    assert entries[4] == ("Dealer Peek", "Yes", False)
