import curses
import functools
from typing import Dict

from jacks.models import CalculatorSettings
from jacks.screens.about import AboutUsScreen
from jacks.screens.calculator import StrategyCalculatorScreen
from jacks.screens.menu import MenuScreen
from jacks.screens.navigation import ScreenFactory, ScreenKind, run_screens
from jacks.tui.curses_io import CursesInput, CursesRenderer


def build_screen_factories(settings: CalculatorSettings) -> Dict[ScreenKind, ScreenFactory]:
    return {
        ScreenKind.menu: MenuScreen,
        ScreenKind.about_us: AboutUsScreen,
        # Each visit reloads the strategies and starts from the default rules.
        ScreenKind.strategy_calculator: functools.partial(StrategyCalculatorScreen, settings),
    }


def _main(window, settings: CalculatorSettings) -> None:
    run_screens(CursesRenderer(window), CursesInput(window), build_screen_factories(settings))


def run_tui(settings: CalculatorSettings) -> None:
    """Run the interactive screens; curses restores the terminal on exit or error."""
    curses.wrapper(_main, settings)
