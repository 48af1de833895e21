import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)


class ScreenKind(str, Enum):
    menu = "menu"
    about_us = "about_us"
    strategy_calculator = "strategy_calculator"


class NavAction(str, Enum):
    noop = "noop"  # keep reading input, nothing to redraw
    refresh = "refresh"  # redraw the current screen
    exit = "exit"
    navigate = "navigate"


@dataclass(frozen=True)
class NavResponse:
    action: NavAction
    target: Optional[ScreenKind] = None

    @classmethod
    def nav_to(cls, target: ScreenKind) -> "NavResponse":
        return cls(NavAction.navigate, ScreenKind(target))


NOOP = NavResponse(NavAction.noop)
REFRESH = NavResponse(NavAction.refresh)
EXIT = NavResponse(NavAction.exit)


class KeyEventKind(str, Enum):
    press = "press"
    release = "release"


@dataclass(frozen=True)
class KeyEvent:
    # Single characters, or one of: up, down, left, right, enter, esc
    key: str
    kind: KeyEventKind = KeyEventKind.press

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.press


@dataclass(frozen=True)
class Area:
    top: int
    left: int
    height: int
    width: int

    def split_rows(self, heights: Sequence[Optional[int]]) -> List["Area"]:
        """Split top to bottom. ``None`` entries share whatever height is left."""
        return [Area(self.top + start, self.left, size, self.width) for start, size in _split(self.height, heights)]

    def split_columns(self, widths: Sequence[Optional[int]]) -> List["Area"]:
        return [Area(self.top, self.left + start, self.height, size) for start, size in _split(self.width, widths)]

    def inner(self, margin: int = 1) -> "Area":
        return Area(
            self.top + margin,
            self.left + margin,
            max(self.height - 2 * margin, 0),
            max(self.width - 2 * margin, 0),
        )


def _split(total: int, sizes: Sequence[Optional[int]]) -> List[Tuple[int, int]]:
    fixed = sum(s for s in sizes if s is not None)
    flexible = [i for i, s in enumerate(sizes) if s is None]
    remaining = max(total - fixed, 0)
    spans = []
    start = 0
    for i, size in enumerate(sizes):
        if size is None:
            share = remaining // len(flexible)
            if i == flexible[-1]:
                share = remaining - share * (len(flexible) - 1)
            size = share
        size = max(min(size, total - start), 0)
        spans.append((start, size))
        start += size
    return spans


class Renderer(Protocol):
    def area(self) -> Area: ...

    def clear(self) -> None: ...

    def refresh(self) -> None: ...

    def render_border(self, area: Area) -> None: ...

    def render_text(self, text: str, area: Area, highlight: bool = False) -> None: ...

    def render_table(
        self, rows: Sequence[Sequence[str]], column_headers: Sequence[str], title: str, area: Area
    ) -> None: ...


class InputSource(Protocol):
    def next_key_event(self) -> KeyEvent: ...


class Screen(ABC):
    kind: ScreenKind

    @abstractmethod
    def process_input(self, event: KeyEvent) -> NavResponse:
        ...

    @abstractmethod
    def render(self, renderer: Renderer) -> None:
        ...


ScreenFactory = Callable[[], Screen]


def draw(screen: Screen, renderer: Renderer) -> None:
    renderer.clear()
    screen.render(renderer)
    renderer.refresh()


def run_screens(
    renderer: Renderer,
    source: InputSource,
    factories: Dict[ScreenKind, ScreenFactory],
    initial: ScreenKind = ScreenKind.menu,
) -> None:
    """
    Drive the active screen until one of them asks to exit.

    Every transition builds a fresh screen from its factory, so nothing from
    the previous screen (such as calculator settings) survives navigation.
    """
    screen = factories[initial]()
    while True:
        draw(screen, renderer)
        while True:
            response = screen.process_input(source.next_key_event())
            if response.action is NavAction.noop:
                continue
            break
        if response.action is NavAction.exit:
            logger.info("Exit requested from %s", screen.kind.value)
            return
        if response.action is NavAction.navigate:
            logger.debug("Navigating from %s to %s", screen.kind.value, response.target.value)
            screen = factories[response.target]()
