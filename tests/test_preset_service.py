"""Tests for preset service."""

from uuid import uuid4

from fittrack.services.food_log import FoodLogService
from fittrack.services.presets import NewPreset, PresetService
from tests.conftest import InMemoryFoodLogRepository, InMemoryPresetRepository


def _service() -> tuple[PresetService, InMemoryFoodLogRepository]:
    food_logs = InMemoryFoodLogRepository()
    service = PresetService(InMemoryPresetRepository(), FoodLogService(food_logs))
    return service, food_logs


def test_create_preset_defaults_description_and_rounds() -> None:
    service, _ = _service()
    user_id = uuid4()

    preset = service.create_preset(
        user_id, NewPreset(name="Protein shake", calories=149.6, protein_g=24)
    )

    assert preset.description == "Protein shake"
    assert preset.calories == 150
    assert preset.carbs_g == 0
    assert preset.fat_g == 0


def test_list_presets_sorted_by_name() -> None:
    service, _ = _service()
    user_id = uuid4()
    service.create_preset(user_id, NewPreset(name="Paneer", calories=265))
    service.create_preset(user_id, NewPreset(name="Eggs", calories=155))

    names = [preset.name for preset in service.list_presets(user_id)]

    assert names == ["Eggs", "Paneer"]


def test_log_preset_creates_food_entry() -> None:
    service, food_logs = _service()
    user_id = uuid4()
    preset = service.create_preset(
        user_id,
        NewPreset(
            name="Dal", calories=230, protein_g=18, carbs_g=40, fat_g=1
        ),
    )

    entry = service.log_preset(user_id, preset.id)

    assert entry is not None
    assert entry.description == "Dal"
    assert entry.meal_type == "preset"
    assert entry.calories == 230
    assert food_logs.entries == [entry]


def test_log_missing_preset_returns_none() -> None:
    service, food_logs = _service()

    assert service.log_preset(uuid4(), uuid4()) is None
    assert food_logs.entries == []


def test_delete_preset() -> None:
    service, _ = _service()
    user_id = uuid4()
    preset = service.create_preset(user_id, NewPreset(name="Roti", calories=120))

    service.delete_preset(preset.id)

    assert service.list_presets(user_id) == []
