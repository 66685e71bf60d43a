"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fittrack.adapters.openai_completion_client import OpenAICompletionClient
from fittrack.adapters.supabase_food_log_repository import SupabaseFoodLogRepository
from fittrack.adapters.supabase_preset_repository import SupabasePresetRepository
from fittrack.adapters.supabase_user_repository import SupabaseUserRepository
from fittrack.config import Settings
from fittrack.services.analysis import AnalysisService
from fittrack.services.auth import AuthService
from fittrack.services.dashboard import DailyTargets, DashboardService
from fittrack.services.food_log import FoodLogService
from fittrack.services.presets import PresetService
from fittrack.services.users import UserService


@dataclass
class AppContainer:
    """Application dependency container."""

    settings: Settings
    auth_service: AuthService
    user_service: UserService
    food_log_service: FoodLogService
    preset_service: PresetService
    analysis_service: AnalysisService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Build the application container with concrete adapters."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    completion_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key
    )

    food_log_service = FoodLogService(
        SupabaseFoodLogRepository(supabase_client),
        timezone_name=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(
            pin=resolved_settings.auth_pin,
            user_id=resolved_settings.default_user_id,
        ),
        user_service=UserService(
            SupabaseUserRepository(supabase_client), pin=resolved_settings.auth_pin
        ),
        food_log_service=food_log_service,
        preset_service=PresetService(
            SupabasePresetRepository(supabase_client), food_log_service
        ),
        analysis_service=AnalysisService(
            client=completion_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        ),
        dashboard_service=DashboardService(
            food_log_service=food_log_service,
            profile=resolved_settings.profile(),
            targets=DailyTargets(
                calories=resolved_settings.calorie_target,
                protein_g=resolved_settings.protein_target_g,
                water_ml=resolved_settings.water_goal_ml,
            ),
            streak_lookback_days=resolved_settings.streak_lookback_days,
        ),
        close_resources=close_resources,
    )
