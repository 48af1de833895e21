import logging
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple, Union

from pydantic import ValidationError

from jacks.errors import StrategyLoadError, StrategyParseError, StrategySourceError
from jacks.models import RuleSet, StrategyDocument

logger = logging.getLogger(__name__)

STRATEGY_EXTENSION = ".json"


class StrategyMatch(NamedTuple):
    key: str
    document: StrategyDocument
    exact: bool


def parse_strategy(text: Union[str, bytes], locator: Optional[str] = None) -> StrategyDocument:
    """Parse one JSON strategy document, generating an id when the source has none."""
    try:
        return StrategyDocument.model_validate_json(text)
    except ValidationError as exc:
        where = f" in {locator}" if locator else ""
        raise StrategyParseError(f"Invalid strategy document{where}: {exc}", locator) from exc


def load_strategy(path: Union[str, Path]) -> StrategyDocument:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StrategySourceError(f"Cannot read strategy {path}: {exc}", str(path)) from exc
    return parse_strategy(text, str(path))


class StrategyRepository:
    """Strategies loaded from a directory, keyed by file name without extension.

    Built once and read-only afterwards. When two files declare the same rules
    both stay reachable by key, but only the first in file-name order answers
    rule lookups, not the last loaded: adding a later file never changes the
    chart an existing rule set resolves to.
    """

    def __init__(self, documents: Optional[Dict[str, StrategyDocument]] = None) -> None:
        self._documents: Dict[str, StrategyDocument] = {}
        self.failures: Dict[str, StrategyLoadError] = {}
        for key, document in (documents or {}).items():
            self.add(key, document)

    @classmethod
    def build(cls, directory: Union[str, Path]) -> "StrategyRepository":
        repository = cls()
        directory = Path(directory)
        try:
            entries = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == STRATEGY_EXTENSION)
        except OSError as exc:
            logger.error("Cannot read strategies directory %s: %s", directory, exc)
            return repository

        for path in entries:
            try:
                document = load_strategy(path)
            except StrategyLoadError as exc:
                # One broken file must not take the calculator down with it.
                logger.warning("Skipping strategy %s: %s", path.name, exc)
                repository.failures[path.stem] = exc
                continue
            repository.add(path.stem, document)

        logger.info("Loaded %d strategies from %s (%d failed)", len(repository), directory, len(repository.failures))
        return repository

    def add(self, key: str, document: StrategyDocument) -> None:
        owner = self.find_exact(document.rules)
        if owner is not None and owner[0] != key:
            logger.warning(
                "Strategy %s has the same rules as %s (%s); lookups by rules will use %s",
                key,
                owner[0],
                document.rules.key(),
                owner[0],
            )
        self._documents[key] = document

    def get(self, key: str) -> Optional[StrategyDocument]:
        return self._documents.get(key)

    def keys(self) -> List[str]:
        return list(self._documents)

    def items(self) -> List[Tuple[str, StrategyDocument]]:
        return list(self._documents.items())

    def find_exact(self, rules: RuleSet) -> Optional[Tuple[str, StrategyDocument]]:
        for key, document in self._documents.items():
            if document.rules == rules:
                return key, document
        return None

    def match(self, rules: RuleSet, fallback_key: str) -> Optional[StrategyMatch]:
        found = self.find_exact(rules)
        if found is not None:
            return StrategyMatch(found[0], found[1], True)
        fallback = self._documents.get(fallback_key)
        if fallback is None:
            return None
        return StrategyMatch(fallback_key, fallback, False)

    def resolve_with_fallback(self, rules: RuleSet, fallback_key: str) -> Optional[StrategyDocument]:
        found = self.match(rules, fallback_key)
        return found.document if found else None

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)
