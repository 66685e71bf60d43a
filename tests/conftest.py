"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from fittrack.config import Settings
from fittrack.containers import AppContainer
from fittrack.domain.food import FoodEntry, FoodPreset
from fittrack.domain.profile import UserRecord
from fittrack.services.analysis import AnalysisService, CompletionClient
from fittrack.services.auth import AuthService
from fittrack.services.dashboard import DailyTargets, DashboardService
from fittrack.services.food_log import FoodLogRepository, FoodLogService
from fittrack.services.presets import PresetRepository, PresetService
from fittrack.services.users import UserRepository, UserService

TEST_USER_ID = UUID("a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11")


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: list[UserRecord] = field(default_factory=list)
    created_payloads: list[dict[str, object]] = field(default_factory=list)

    def get_first_user(self) -> UserRecord | None:
        return self.users[0] if self.users else None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        self.created_payloads.append(payload)
        user = UserRecord(
            id=uuid4(),
            weight_kg=payload.get("weight_kg"),
            height_cm=payload.get("height_cm"),
            age=payload.get("age"),
            goal=payload.get("goal"),
        )
        self.users.append(user)
        return user


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodEntry] = field(default_factory=list)

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4(),
            user_id=user_id,
            logged_at=datetime.fromisoformat(payload["logged_at"]),
            description=payload["description"],
            calories=payload["calories"],
            protein_g=payload.get("protein_g"),
            carbs_g=payload.get("carbs_g"),
            fat_g=payload.get("fat_g"),
            fiber_g=payload.get("fiber_g"),
            meal_type=payload.get("meal_type"),
        )
        self.entries.append(entry)
        return entry

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        matching = [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.logged_at < end
        ]
        return sorted(matching, key=lambda entry: entry.logged_at, reverse=True)

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries = [entry for entry in self.entries if entry.id != entry_id]

    def add(  # noqa: PLR0913
        self,
        user_id: UUID,
        logged_at: datetime,
        calories: int,
        protein_g: float | None = None,
        carbs_g: float | None = None,
        fat_g: float | None = None,
        fiber_g: float | None = None,
        description: str = "food",
    ) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4(),
            user_id=user_id,
            logged_at=logged_at,
            description=description,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
            fiber_g=fiber_g,
            meal_type="snack",
        )
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryPresetRepository(PresetRepository):
    """In-memory preset repository for tests."""

    presets: dict[UUID, FoodPreset] = field(default_factory=dict)

    def list_presets(self, user_id: UUID) -> list[FoodPreset]:
        owned = [p for p in self.presets.values() if p.user_id == user_id]
        return sorted(owned, key=lambda preset: preset.name)

    def get_preset(self, preset_id: UUID) -> FoodPreset | None:
        return self.presets.get(preset_id)

    def create_preset(self, user_id: UUID, payload: dict[str, object]) -> FoodPreset:
        preset = FoodPreset(id=uuid4(), user_id=user_id, **payload)
        self.presets[preset.id] = preset
        return preset

    def delete_preset(self, preset_id: UUID) -> None:
        self.presets.pop(preset_id, None)


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning canned text."""

    text: str = (
        "Here you go:\n```json\n"
        '{"food_name": "Paneer tikka", "portion_description": "1 plate", '
        '"calories": 420, "protein_g": 28, "carbs_g": 12, "fat_g": 29, '
        '"fiber_g": 3, "confidence": "medium"}\n```'
    )
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)
    image_urls: list[str | None] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        self.prompts.append(prompt)
        self.image_urls.append(image_data_url)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
        auth_pin="1234",
        default_user_id=TEST_USER_ID,
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def preset_repository() -> InMemoryPresetRepository:
    return InMemoryPresetRepository()


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    food_log_repository: InMemoryFoodLogRepository,
    preset_repository: InMemoryPresetRepository,
    completion_client: FakeCompletionClient,
) -> AppContainer:
    food_log_service = FoodLogService(
        food_log_repository, timezone_name=settings.timezone
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=AuthService(pin=settings.auth_pin, user_id=TEST_USER_ID),
        user_service=UserService(user_repository, pin=settings.auth_pin),
        food_log_service=food_log_service,
        preset_service=PresetService(preset_repository, food_log_service),
        analysis_service=AnalysisService(
            client=completion_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        dashboard_service=DashboardService(
            food_log_service=food_log_service,
            profile=settings.profile(),
            targets=DailyTargets(
                calories=settings.calorie_target,
                protein_g=settings.protein_target_g,
                water_ml=settings.water_goal_ml,
            ),
            streak_lookback_days=settings.streak_lookback_days,
        ),
        close_resources=close_resources,
    )
