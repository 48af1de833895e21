from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from jacks.engine.strategy import resolve
from jacks.errors import StrategyLookupError
from jacks.models import (
    ActionLookupResult,
    CalculatorSettings,
    HandCategory,
    RuleSet,
    StrategyDocument,
    StrategySummary,
    SurrenderRule,
)
from jacks.services.repository import StrategyRepository

router = APIRouter(tags=["strategies"])


def get_repository(request: Request) -> StrategyRepository:
    return request.app.state.repository


def get_settings(request: Request) -> CalculatorSettings:
    return request.app.state.settings


@router.get("/strategies", response_model=List[StrategySummary])
async def list_strategies(repository: StrategyRepository = Depends(get_repository)) -> List[StrategySummary]:
    return [
        StrategySummary(key=key, id=doc.id, name=doc.name, description=doc.description, rules=doc.rules)
        for key, doc in repository.items()
    ]


@router.get("/strategies/{key}", response_model=StrategyDocument)
async def get_strategy(key: str, repository: StrategyRepository = Depends(get_repository)) -> StrategyDocument:
    document = repository.get(key)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Strategy {key!r} not found")
    return document


@router.get("/resolve", response_model=ActionLookupResult)
async def resolve_action(
    category: HandCategory,
    total: int,
    upcard: int = Query(..., description="Dealer upcard value, 2-10, 11 for an ace"),
    decks: int = Query(..., ge=1),
    dealer_stands_on_soft_17: bool = True,
    double_after_split: bool = True,
    dealer_peek: bool = True,
    surrender: SurrenderRule = SurrenderRule.not_allowed,
    repository: StrategyRepository = Depends(get_repository),
    settings: CalculatorSettings = Depends(get_settings),
) -> ActionLookupResult:
    rules = RuleSet(
        decks=decks,
        dealer_stands_on_soft_17=dealer_stands_on_soft_17,
        double_after_split=double_after_split,
        dealer_peek=dealer_peek,
        surrender_allowed=surrender,
    )
    found = repository.match(rules, settings.fallback_key)
    if found is None:
        raise HTTPException(status_code=404, detail=f"No strategy for {rules.key()}")
    try:
        action = resolve(found.document, category, total, upcard)
    except StrategyLookupError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return ActionLookupResult(
        strategy_key=found.key,
        exact_match=found.exact,
        category=category,
        total=total,
        upcard=upcard,
        code=action.code,
        action=action.name,
        description=found.document.describe(action),
    )
