"""Core parsing, resolution and output formatting."""

from runbot.core.chunker import FRAGMENT_OVERHEAD, avoid_separator_cut, chunk, crop_to_fit
from runbot.core.extractor import extract
from runbot.core.languages import LanguageRegistry, default_registry, resolve
from runbot.core.pipeline import RunPipeline, prepare_request
from runbot.core.types import CropResult, ExecutionResult, LanguageEntry, OutputFragment, ParsedMessage, ResolvedRequest

__all__ = [
    "FRAGMENT_OVERHEAD",
    "CropResult",
    "ExecutionResult",
    "LanguageEntry",
    "LanguageRegistry",
    "OutputFragment",
    "ParsedMessage",
    "ResolvedRequest",
    "RunPipeline",
    "avoid_separator_cut",
    "chunk",
    "crop_to_fit",
    "default_registry",
    "extract",
    "prepare_request",
    "resolve",
]
