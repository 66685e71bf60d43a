"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fittrack.api.auth import require_session
from fittrack.api.auth import router as auth_router
from fittrack.api.food import current_user_id
from fittrack.api.food import router as food_router
from fittrack.api.models import (
    AnalyzeFoodRequest,
    BodyCompositionRequest,
    DaysToGoalRequest,
    MetabolismRequest,
)
from fittrack.app_logging import configure_logging
from fittrack.containers import AppContainer
from fittrack.domain.profile import UserProfile
from fittrack.services.analysis import BodyAnalysisError, FoodAnalysisError
from fittrack.services.body_composition import (
    InvalidMeasurementError,
    get_body_composition,
)
from fittrack.services.metabolism import (
    calculate_days_to_goal,
    calculate_deficit,
    calculate_user_stats,
)

_MAX_PHOTO_BYTES = 10 * 1024 * 1024


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(food_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "Invalid request on %s %s", request.method, request.url.path
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc)
        )

    @app.exception_handler(InvalidMeasurementError)
    async def measurement_error(
        request: Request, exc: InvalidMeasurementError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(FoodAnalysisError)
    @app.exception_handler(BodyAnalysisError)
    async def analysis_error(request: Request, exc: RuntimeError) -> JSONResponse:
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path
        )
        message = "Internal server error"
        if container.settings.environment == "local":
            message = f"{message} (debug: {type(exc).__name__}: {exc})"
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/ai/analyze-food", dependencies=[Depends(require_session)])
    async def analyze_food(
        body: AnalyzeFoodRequest, request: Request
    ) -> dict[str, object]:
        """Estimate nutrition for a food description."""
        description = body.description.strip()
        if not description:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Food description is required",
            )
        state_container: AppContainer = request.app.state.container
        result = await state_container.analysis_service.analyze_food(description)
        return {"success": True, "data": result.model_dump()}

    @app.post("/api/ai/analyze-body", dependencies=[Depends(require_session)])
    async def analyze_body(request: Request) -> dict[str, object]:
        """Return feedback for a progress photo sent as the raw request body."""
        image_bytes = await request.body()
        if not image_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Photo is required"
            )
        if len(image_bytes) > _MAX_PHOTO_BYTES:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail="Photo is too large",
            )
        state_container: AppContainer = request.app.state.container
        result = await state_container.analysis_service.analyze_body_photo(
            image_bytes
        )
        return {"success": True, "data": result.model_dump()}

    @app.get("/api/dashboard", dependencies=[Depends(require_session)])
    async def dashboard(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return today's totals, targets, progress and streak."""
        state_container: AppContainer = request.app.state.container
        snapshot = state_container.dashboard_service.get_dashboard(user_id)
        return {"success": True, "data": jsonable_encoder(snapshot)}

    @app.post("/api/calculators/metabolism", dependencies=[Depends(require_session)])
    async def metabolism(body: MetabolismRequest) -> dict[str, object]:
        """Return BMR, TDEE, calorie target and macros for a profile."""
        stats = calculate_user_stats(
            UserProfile(
                weight_kg=body.weight_kg,
                height_cm=body.height_cm,
                age=body.age,
                activity_level=body.activity_level,
                goal=body.goal,
            )
        )
        data: dict[str, object] = {"stats": jsonable_encoder(stats)}
        if body.consumed_calories is not None:
            balance = calculate_deficit(body.consumed_calories, stats.target_calories)
            data["balance"] = jsonable_encoder(balance)
        return {"success": True, "data": data}

    @app.post(
        "/api/calculators/body-composition", dependencies=[Depends(require_session)]
    )
    async def body_composition(body: BodyCompositionRequest) -> dict[str, object]:
        """Return Navy-method body fat with lean/fat mass and a fat-loss target."""
        composition = get_body_composition(
            body.weight_kg,
            body.waist_cm,
            body.neck_cm,
            body.height_cm,
            target_body_fat_percent=body.target_body_fat,
        )
        return {"success": True, "data": jsonable_encoder(composition)}

    @app.post(
        "/api/calculators/days-to-goal", dependencies=[Depends(require_session)]
    )
    async def days_to_goal(body: DaysToGoalRequest) -> dict[str, object]:
        """Return days until the goal weight at the current weekly rate."""
        days = calculate_days_to_goal(
            body.current_weight, body.goal_weight, body.weekly_change_kg
        )
        return {"success": True, "data": {"days": days}}

    return app


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": message}
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Return a one-line summary of request validation errors."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts) or "Invalid request"
