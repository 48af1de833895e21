import logging
from typing import Optional

from jacks.engine.strategy import TABLE_HEADERS, TABLE_TITLES, table_rows
from jacks.models import CalculatorSettings, HandCategory
from jacks.screens import keys
from jacks.screens.navigation import EXIT, NOOP, REFRESH, Area, KeyEvent, NavResponse, Renderer, Screen, ScreenKind
from jacks.screens.text import FOOTER_CALCULATOR
from jacks.services.repository import StrategyRepository
from jacks.services.rule_config import RuleConfigurationController

logger = logging.getLogger(__name__)

TABLE_ORDER = [HandCategory.hard, HandCategory.soft, HandCategory.pair]


class StrategyCalculatorScreen(Screen):
    """Game settings on the left, the strategy chart they select on the right."""

    kind = ScreenKind.strategy_calculator

    def __init__(self, settings: CalculatorSettings, repository: Optional[StrategyRepository] = None) -> None:
        if repository is None:
            repository = StrategyRepository.build(settings.strategies_dir)
        self.controller = RuleConfigurationController(repository, settings)
        logger.info("Strategy calculator opened with %s", self.controller.active_key)

    def process_input(self, event: KeyEvent) -> NavResponse:
        if not event.is_press:
            return NOOP
        if event.key in keys.QUIT:
            return EXIT
        if event.key in keys.MAIN_MENU:
            return NavResponse.nav_to(ScreenKind.menu)
        if event.key in keys.DOWN:
            return self._move_cursor(1)
        if event.key in keys.UP:
            return self._move_cursor(-1)
        if event.key in keys.RIGHT:
            return self._adjust(1)
        if event.key in keys.LEFT:
            return self._adjust(-1)
        if event.key in keys.RESIZE:
            return REFRESH
        return NOOP

    def _move_cursor(self, delta: int) -> NavResponse:
        before = self.controller.cursor
        self.controller.move_cursor(delta)
        return NOOP if self.controller.cursor == before else REFRESH

    def _adjust(self, delta: int) -> NavResponse:
        before = self.controller.rules
        self.controller.adjust_active_option(delta)
        return NOOP if self.controller.rules == before else REFRESH

    def heading(self) -> str:
        controller = self.controller
        document = controller.active_document
        if document is None:
            return "No strategy available for these rules"
        if controller.exact_match:
            return document.name
        return f"{document.name} (no exact chart for these rules)"

    def render(self, renderer: Renderer) -> None:
        screen = renderer.area()
        _, main, footer = screen.split_rows([2, None, 2])
        settings_area, chart_area = main.split_columns([main.width // 4, None])

        renderer.render_border(settings_area)
        renderer.render_border(chart_area)
        settings_title, settings_body = settings_area.inner().split_rows([2, None])
        renderer.render_text("Game Settings", settings_title)
        self._render_settings(renderer, settings_body)

        chart_title, tables_area, legend_area = chart_area.inner().split_rows([2, None, 2])
        renderer.render_text(f"Strategy Chart: {self.heading()}", chart_title)
        document = self.controller.active_document
        if document is not None:
            gap = 2
            widths = [None, gap, None, gap, None]
            columns = tables_area.split_columns(widths)[::2]
            for category, area in zip(TABLE_ORDER, columns):
                renderer.render_table(table_rows(document, category), TABLE_HEADERS, TABLE_TITLES[category], area)
            legend = "  ".join(f"{code}={text}" for code, text in sorted(document.action_legend.items()))
            renderer.render_text(legend, legend_area)

        renderer.render_text(FOOTER_CALCULATOR, footer)

    def _render_settings(self, renderer: Renderer, area: Area) -> None:
        entries = self.controller.menu_entries()
        rows = area.split_rows([2] * len(entries))
        for (label, value, selected), row in zip(entries, rows):
            text = f"{label}: < {value} >"
            if selected:
                text = f"> {text}"
            renderer.render_text(text, row, highlight=selected)
