from typing import Optional


class StrategyError(Exception):
    """Base class for everything raised while loading or reading strategies."""


class StrategyLoadError(StrategyError):
    def __init__(self, message: str, locator: Optional[str] = None) -> None:
        super().__init__(message)
        self.locator = locator


class StrategySourceError(StrategyLoadError):
    """The strategy source could not be read."""


class StrategyParseError(StrategyLoadError):
    """The strategy source was read but is not a valid strategy document."""


class StrategyLookupError(StrategyError, LookupError):
    """A lookup against a loaded strategy could not produce an action."""


class InvalidTotal(StrategyLookupError):
    pass


class InvalidUpcard(StrategyLookupError):
    pass


class NoRowForTotal(StrategyLookupError):
    pass


class MissingOrInvalidAction(StrategyLookupError):
    pass


class UnknownActionCode(StrategyLookupError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown action code: {code!r}")
        self.code = code
