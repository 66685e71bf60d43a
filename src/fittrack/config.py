"""Application configuration."""

import os
from uuid import UUID

from pydantic_settings import BaseSettings, SettingsConfigDict

from fittrack.domain.profile import ActivityLevel, Goal, UserProfile

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "low"
    openai_store: bool = False
    auth_pin: str = "0007"
    default_user_id: UUID = UUID("a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11")
    timezone: str = "UTC"
    weight_kg: float = 67.7
    height_cm: float = 168
    age: int = 23
    activity_level: ActivityLevel = "moderate"
    goal: Goal = "recomp"
    calorie_target: int = 2200
    protein_target_g: int = 135
    water_goal_ml: int = 3000
    streak_lookback_days: int = 60
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def profile(self) -> UserProfile:
        """Return the configured user's body profile."""
        return UserProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            activity_level=self.activity_level,
            goal=self.goal,
        )

    @property
    def secure_cookies(self) -> bool:
        """Return True when auth cookies must only travel over HTTPS."""
        return self.environment == "production"
