"""API endpoints for the liquidity engine."""

import asyncio

import structlog
from fastapi import APIRouter, Depends

from liquidity.api.schemas import ErrorResponse, LiquidityRequest, LiquidityResponse
from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.engine import LiquidityEngine
from liquidity.providers import StaticPoolProvider, StaticPriceProvider, StaticTokenProvider

logger = structlog.get_logger()

router = APIRouter()


def get_config() -> LiquidityConfig:
    """Dependency provider for the valuation config.

    Override this in tests to inject a different config:
        app.dependency_overrides[get_config] = lambda: LiquidityConfig(...)
    """
    return DEFAULT_LIQUIDITY_CONFIG


@router.post(
    "/liquidity",
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def liquidity(
    request: LiquidityRequest,
    config: LiquidityConfig = Depends(get_config),
) -> LiquidityResponse:
    """Value a single pool.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Valuation failure: 422 with {"error": <type>, "detail": <message>}
    """
    logger.info(
        "received_liquidity_request",
        pool=request.pool.id,
        pool_type=request.pool.pool_type,
        token_count=request.pool.token_count,
        nested_pools=len(request.pools),
    )

    engine = LiquidityEngine(
        tokens=StaticTokenProvider(request.tokens),
        prices=StaticPriceProvider(request.prices),
        pools=StaticPoolProvider(request.pools),
        config=config,
    )

    # Valuation is pure CPU work; keep it off the event loop
    loop = asyncio.get_running_loop()
    value = await loop.run_in_executor(None, engine.get_liquidity, request.pool)

    logger.info("returning_liquidity", pool=request.pool.id, liquidity=value)
    return LiquidityResponse(pool=request.pool.id, pool_type=request.pool.pool_type, liquidity=value)
