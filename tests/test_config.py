"""Tests for settings."""

from fittrack.config import Settings


def test_profile_from_settings(settings: Settings) -> None:
    profile = settings.profile()

    assert profile.weight_kg == 67.7
    assert profile.height_cm == 168
    assert profile.activity_level == "moderate"
    assert profile.goal == "recomp"


def test_secure_cookies_only_in_production(settings: Settings) -> None:
    assert not settings.secure_cookies
    assert settings.model_copy(update={"environment": "production"}).secure_cookies


def test_streak_lookback_defaults_to_sixty_days(settings: Settings) -> None:
    assert settings.streak_lookback_days == 60
