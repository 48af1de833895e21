from typing import Optional

from fastapi import FastAPI

from jacks.api.routes import router as api_router
from jacks.data.presets import DEFAULT_SETTINGS
from jacks.models import CalculatorSettings
from jacks.services.repository import StrategyRepository


def create_app(settings: Optional[CalculatorSettings] = None) -> FastAPI:
    settings = settings or DEFAULT_SETTINGS
    app = FastAPI(title="Jacks Blackjack", version="0.1.0")

    # Loaded once; requests only read from it.
    app.state.settings = settings
    app.state.repository = StrategyRepository.build(settings.strategies_dir)

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "strategies": len(app.state.repository)}

    app.include_router(api_router, prefix="/api")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jacks.main:create_app", factory=True, host="127.0.0.1", port=8000, reload=True)
