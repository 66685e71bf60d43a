"""AI-assisted nutrition and body-photo estimation."""

import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from fittrack.domain.analysis import BodyAnalysis, FoodAnalysis

_logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

FOOD_ANALYSIS_PROMPT = """You are a nutrition expert specializing in Indian cuisine.

Analyze the following food description and return ONLY a JSON object with nutritional information.
Be accurate for Indian foods like paneer (25g protein per 100g), roti (3g protein per piece), dal (7-9g protein per cup cooked), eggs (6g protein each).

Food description: {description}

Return ONLY this JSON format, no other text:
{{
  "food_name": "standardized name of the food",
  "portion_description": "estimated portion size",
  "calories": number (kcal),
  "protein_g": number,
  "carbs_g": number,
  "fat_g": number,
  "fiber_g": number,
  "confidence": "high" | "medium" | "low"
}}

If multiple items, sum them up into one response.
Example: "2 rotis with paneer sabji" = ~400 cal, ~20g protein"""  # noqa: E501

BODY_ANALYSIS_PROMPT = """You are a fitness expert analyzing body composition photos.

Analyze this progress photo and provide:
1. Estimated body fat percentage range
2. Visible muscle development areas
3. Areas that could use more focus
4. Specific recommendations for the user's goal (belly fat loss + muscle gain)

Be encouraging but honest.

Return in this JSON format:
{
  "estimated_body_fat_range": "X-Y%",
  "strong_areas": ["area1", "area2"],
  "improvement_areas": ["area1", "area2"],
  "recommendations": ["specific action 1", "specific action 2"],
  "overall_assessment": "2-3 sentences of feedback"
}"""

FOOD_ERROR_MESSAGE = (
    "Failed to analyze food. Please try again or enter values manually."
)
BODY_ERROR_MESSAGE = "Failed to analyze photo. Please try again."


class FoodAnalysisError(RuntimeError):
    """Raised when a food description can't be turned into nutrition data."""


class BodyAnalysisError(RuntimeError):
    """Raised when a progress photo can't be analyzed."""


class CompletionClient(Protocol):
    """Interface for LLM text completions."""

    async def complete(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Return the completion text for a prompt."""


@dataclass
class AnalysisService:
    """Service that prompts the completion client and validates results."""

    client: CompletionClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze_food(self, description: str) -> FoodAnalysis:
        """Estimate nutrition for a free-text description."""
        prompt = FOOD_ANALYSIS_PROMPT.format(description=description)
        try:
            text = await self._complete(prompt)
            return FoodAnalysis.model_validate(extract_json(text))
        except Exception as exc:
            _logger.exception("Food analysis failed")
            raise FoodAnalysisError(FOOD_ERROR_MESSAGE) from exc

    async def analyze_body_photo(self, image_bytes: bytes) -> BodyAnalysis:
        """Return body-composition feedback for a progress photo."""
        try:
            text = await self._complete(
                BODY_ANALYSIS_PROMPT, image_data_url=_to_data_url(image_bytes)
            )
            return BodyAnalysis.model_validate(extract_json(text))
        except Exception as exc:
            _logger.exception("Body photo analysis failed")
            raise BodyAnalysisError(BODY_ERROR_MESSAGE) from exc

    async def _complete(self, prompt: str, image_data_url: str | None = None) -> str:
        return await self.client.complete(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
            image_data_url=image_data_url,
        )


def extract_json(text: str) -> dict[str, object]:
    """Return the JSON object embedded in completion text.

    Models sometimes wrap the object in prose or markdown fences, so the
    outermost ``{...}`` span is parsed.
    """
    match = _JSON_OBJECT.search(text)
    if not match:
        raise ValueError("No JSON found in response")
    data = json.loads(match.group(0))
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return data


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
