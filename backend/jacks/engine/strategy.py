from typing import Dict, List, Optional, Sequence, Tuple, Union

from jacks.errors import InvalidTotal, InvalidUpcard, MissingOrInvalidAction, NoRowForTotal
from jacks.models import HandCategory, PlayerAction, StrategyDocument

CARD_VALUES = {**{str(i): i for i in range(2, 11)}, "T": 10, "J": 10, "Q": 10, "K": 10, "A": 11}

TOTAL_RANGES: Dict[HandCategory, Tuple[int, int]] = {
    HandCategory.hard: (5, 21),
    HandCategory.soft: (13, 21),
    HandCategory.pair: (2, 11),
}

ACE = 11
MIN_UPCARD = 2
MAX_UPCARD = ACE

# First column holds the hand, then dealer 2 through ace.
TABLE_HEADERS = [" ", "2", "3", "4", "5", "6", "7", "8", "9", "10", "A"]

TABLE_TITLES = {
    HandCategory.hard: "Hard Hands",
    HandCategory.soft: "Soft Hands",
    HandCategory.pair: "Pairs",
}


def upcard_value(card: Union[str, int]) -> int:
    """Dealer upcard as a number, with face cards as 10 and the ace as 11."""
    if isinstance(card, int):
        value = card
    else:
        label = card.strip().upper()
        if label not in CARD_VALUES:
            raise InvalidUpcard(f"Invalid dealer upcard: {card!r}")
        value = CARD_VALUES[label]
    if not MIN_UPCARD <= value <= MAX_UPCARD:
        raise InvalidUpcard(f"Invalid dealer upcard: {card}")
    return value


def upcard_index(dealer_upcard: int) -> int:
    # Dealer's 2 maps to index 0, the ace (11) to index 9.
    return dealer_upcard - MIN_UPCARD


def _rows(document: StrategyDocument, category: HandCategory):
    tables = document.tables
    if category is HandCategory.hard:
        return [(row.total, row.actions) for row in tables.hard_hands]
    if category is HandCategory.soft:
        return [(row.total, row.actions) for row in tables.soft_hands]
    return [(row.pair, row.actions) for row in tables.pair_hands]


def find_row(document: StrategyDocument, category: HandCategory, total: int) -> Optional[Sequence[str]]:
    for row_total, actions in _rows(document, category):
        if row_total == total:
            return actions
    return None


def resolve(document: StrategyDocument, category: HandCategory, total: int, dealer_upcard: int) -> PlayerAction:
    """
    Look up the recommended play for a hand against the dealer's upcard.

    ``total`` is the hand total for hard and soft hands and the value of one
    card of the pair for pairs (11 for aces). Raises a ``StrategyLookupError``
    subclass when the document cannot answer.
    """
    category = HandCategory(category)
    low, high = TOTAL_RANGES[category]
    if not low <= total <= high:
        raise InvalidTotal(f"Invalid {category.value} hand total: {total}")

    if not MIN_UPCARD <= dealer_upcard <= MAX_UPCARD:
        raise InvalidUpcard(f"Invalid dealer upcard: {dealer_upcard}")

    actions = find_row(document, category, total)
    if actions is None:
        raise NoRowForTotal(f"No strategy for {category.value} hand with total {total}")

    index = upcard_index(dealer_upcard)
    if index >= len(actions) or not isinstance(actions[index], str):
        raise MissingOrInvalidAction(
            f"Missing action for dealer upcard {dealer_upcard} in {category.value} hand total {total}"
        )

    return PlayerAction.from_code(actions[index])


def hard_hand_action(document: StrategyDocument, total: int, dealer_upcard: int) -> PlayerAction:
    return resolve(document, HandCategory.hard, total, dealer_upcard)


def soft_hand_action(document: StrategyDocument, total: int, dealer_upcard: int) -> PlayerAction:
    return resolve(document, HandCategory.soft, total, dealer_upcard)


def pair_action(document: StrategyDocument, single_card_value: int, dealer_upcard: int) -> PlayerAction:
    return resolve(document, HandCategory.pair, single_card_value, dealer_upcard)


def row_label(category: HandCategory, total: int) -> str:
    if category is HandCategory.soft:
        # Soft totals are the ace plus one other card.
        return f"A{total - ACE}"
    if category is HandCategory.pair and total == ACE:
        return "A"
    return str(total)


def table_rows(document: StrategyDocument, category: HandCategory) -> List[List[str]]:
    """Display cells for one table: the hand label followed by the ten action codes."""
    category = HandCategory(category)
    return [[row_label(category, total), *actions] for total, actions in _rows(document, category)]
