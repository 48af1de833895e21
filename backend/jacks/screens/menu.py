from enum import Enum

from jacks.screens import keys
from jacks.screens.navigation import EXIT, NOOP, REFRESH, KeyEvent, NavResponse, Renderer, Screen, ScreenKind
from jacks.screens.text import FOOTER_MENU, SUB_TITLE, TITLE
from jacks.services.rule_config import clamp_index


class MenuOption(str, Enum):
    strategy_calculator = "Strategy Calculator"
    about_us = "About Us"


MENU_ITEMS = list(MenuOption)

MENU_TARGETS = {
    MenuOption.strategy_calculator: ScreenKind.strategy_calculator,
    MenuOption.about_us: ScreenKind.about_us,
}


class MenuScreen(Screen):
    kind = ScreenKind.menu

    def __init__(self) -> None:
        self.active_menu_index = 0

    @property
    def selected(self) -> MenuOption:
        return MENU_ITEMS[self.active_menu_index]

    def _move(self, delta: int) -> NavResponse:
        index = clamp_index(self.active_menu_index, delta, len(MENU_ITEMS))
        if index == self.active_menu_index:
            return NOOP
        self.active_menu_index = index
        return REFRESH

    def process_input(self, event: KeyEvent) -> NavResponse:
        if not event.is_press:
            return NOOP
        if event.key in keys.QUIT:
            return EXIT
        if event.key in keys.DOWN:
            return self._move(1)
        if event.key in keys.UP:
            return self._move(-1)
        if event.key in keys.SELECT:
            return NavResponse.nav_to(MENU_TARGETS[self.selected])
        if event.key in keys.RESIZE:
            return REFRESH
        return NOOP

    def render(self, renderer: Renderer) -> None:
        screen = renderer.area()
        renderer.render_border(screen)
        title, sub_title, _, body, footer = screen.inner().split_rows([5, 1, 2, None, 1])
        renderer.render_text(TITLE.strip("\n"), title)
        renderer.render_text(SUB_TITLE, sub_title)
        rows = body.split_rows([2] * len(MENU_ITEMS))
        for i, (item, row) in enumerate(zip(MENU_ITEMS, rows)):
            selected = i == self.active_menu_index
            text = f"> {item.value}" if selected else item.value
            renderer.render_text(text, row, highlight=selected)
        renderer.render_text(FOOTER_MENU, footer)
