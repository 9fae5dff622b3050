"""Base provider interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from PIL import Image

ImageInput = str | Path | Image.Image


class BaseProvider(ABC):
    """Abstract base class for vision model providers."""

    @abstractmethod
    def generate_json(
        self,
        images: Sequence[ImageInput],
        prompt: str,
        *,
        max_output_tokens: int,
    ) -> str | None:
        """Send images and a prompt, asking for a JSON object back.

        Args:
            images: Image inputs (file paths, Path objects, or PIL Images)
            prompt: Instruction text sent after the images
            max_output_tokens: Upper bound on the response length

        Returns:
            The raw response text, or None if the model returned nothing
        """
        pass

    def get_metadata(self) -> dict[str, str]:
        """Return provider-specific call metadata."""
        return {}
