"""Gemini provider implementation."""

import os
from collections.abc import Sequence
from pathlib import Path

from google import genai
from google.genai import types
from PIL import Image

from envase_lens.exceptions import AuthenticationError, ImageError, RateLimitError, VisionModelError
from envase_lens.providers.base import BaseProvider, ImageInput

DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiProvider(BaseProvider):
    """Gemini Vision API provider."""

    def __init__(self, api_key: str | None = None, model: str | None = None, temperature: float = 0.1):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name. Falls back to ENVASE_LENS_GEMINI_MODEL, then the default.
            temperature: Sampling temperature for both analysis passes.

        Raises:
            AuthenticationError: If no API key is provided or found.
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.model = model or os.environ.get("ENVASE_LENS_GEMINI_MODEL", DEFAULT_MODEL)
        self.temperature = temperature
        self.client = genai.Client(api_key=self.api_key)

    def _load_image(self, image: ImageInput) -> Image.Image:
        """Load image from various input types."""
        if isinstance(image, Image.Image):
            return image

        path = Path(image) if isinstance(image, str) else image
        if not path.exists():
            raise ImageError(f"Image file not found: {path}")

        try:
            return Image.open(path)
        except Exception as e:
            raise ImageError(f"Failed to open image: {e}") from e

    def generate_json(
        self,
        images: Sequence[ImageInput],
        prompt: str,
        *,
        max_output_tokens: int,
    ) -> str | None:
        """Run one Gemini call with all images followed by the prompt.

        Raises:
            ImageError: If an image cannot be loaded
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
            VisionModelError: If the call fails for any other reason
        """
        contents: list = [self._load_image(image) for image in images]
        contents.append(prompt)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    temperature=self.temperature,
                    max_output_tokens=max_output_tokens,
                ),
            )
        except genai.errors.ClientError as e:
            if "rate" in str(e).lower() or "quota" in str(e).lower():
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in str(e).lower() or "key" in str(e).lower():
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise VisionModelError(f"Gemini request rejected: {e}") from e
        except Exception as e:
            raise VisionModelError(f"Gemini request failed: {e}") from e

        return response.text

    def get_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model}
