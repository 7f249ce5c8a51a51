"""runbot - run fenced code from chat messages."""

from runbot.core import LanguageRegistry, RunPipeline, chunk, crop_to_fit, extract, resolve

__version__ = "0.1.0"

__all__ = ["LanguageRegistry", "RunPipeline", "chunk", "crop_to_fit", "extract", "resolve"]
