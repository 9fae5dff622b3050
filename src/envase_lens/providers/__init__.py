"""Providers for envase-lens."""

from envase_lens.providers.base import BaseProvider, ImageInput
from envase_lens.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider", "ImageInput"]
