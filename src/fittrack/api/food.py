"""Food log and preset endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder

from fittrack.api.auth import require_session
from fittrack.api.models import LogFoodRequest, PresetRequest
from fittrack.services.food_log import NewFoodEntry
from fittrack.services.presets import NewPreset

if TYPE_CHECKING:
    from fittrack.containers import AppContainer

router = APIRouter(
    prefix="/api/food", tags=["food"], dependencies=[Depends(require_session)]
)


def current_user_id(request: Request) -> UUID:
    """Return the stored user's id, creating the row on first use."""
    container: AppContainer = request.app.state.container
    profile = container.settings.profile()
    return container.user_service.ensure_user(profile).id


@router.get("/log")
async def list_today(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return today's food entries."""
    container: AppContainer = request.app.state.container
    entries = container.food_log_service.list_today(user_id)
    return {"success": True, "data": jsonable_encoder(entries)}


@router.post("/log")
async def log_food(
    body: LogFoodRequest, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Log a food entry."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.log_food(
        user_id,
        NewFoodEntry(
            description=body.description,
            calories=body.calories,
            protein_g=body.protein_g,
            carbs_g=body.carbs_g,
            fat_g=body.fat_g,
            fiber_g=body.fiber_g,
            meal_type=body.meal_type,
        ),
    )
    return {"success": True, "data": jsonable_encoder(entry)}


@router.delete("/log")
async def delete_food(
    request: Request, id: UUID | None = None  # noqa: A002
) -> dict[str, object]:
    """Delete a food entry by id."""
    if id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Food log ID is required",
        )
    container: AppContainer = request.app.state.container
    container.food_log_service.delete(id)
    return {"success": True}


@router.get("/history")
async def history(
    request: Request,
    days: int = Query(default=7, ge=1, le=366),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return entries grouped by day with daily totals."""
    container: AppContainer = request.app.state.container
    grouped = container.food_log_service.get_history(user_id, days=days)
    return {"success": True, "data": jsonable_encoder(grouped)}


@router.get("/summary")
async def summary(
    request: Request,
    period: Literal["week", "month"] = "week",
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return daily totals and averages for the current week or month."""
    container: AppContainer = request.app.state.container
    if period == "week":
        result = container.food_log_service.get_week(user_id)
    else:
        result = container.food_log_service.get_month(user_id)
    return {"success": True, "data": jsonable_encoder(result)}


@router.get("/presets")
async def list_presets(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return saved presets ordered by name."""
    container: AppContainer = request.app.state.container
    presets = container.preset_service.list_presets(user_id)
    return {"success": True, "data": jsonable_encoder(presets)}


@router.post("/presets")
async def create_preset(
    body: PresetRequest, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Save a preset."""
    container: AppContainer = request.app.state.container
    preset = container.preset_service.create_preset(
        user_id,
        NewPreset(
            name=body.name,
            description=body.description,
            calories=body.calories,
            protein_g=body.protein_g,
            carbs_g=body.carbs_g,
            fat_g=body.fat_g,
        ),
    )
    return {"success": True, "data": jsonable_encoder(preset)}


@router.delete("/presets")
async def delete_preset(
    request: Request, id: UUID | None = None  # noqa: A002
) -> dict[str, object]:
    """Delete a preset by id."""
    if id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Preset ID is required"
        )
    container: AppContainer = request.app.state.container
    container.preset_service.delete_preset(id)
    return {"success": True}


@router.post("/presets/{preset_id}/log")
async def log_preset(
    preset_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Log a preset as today's food entry."""
    container: AppContainer = request.app.state.container
    entry = container.preset_service.log_preset(user_id, preset_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Preset not found"
        )
    return {"success": True, "data": jsonable_encoder(entry)}
