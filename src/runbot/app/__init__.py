"""Application runtime package."""

from runbot.app.bootstrap import build_runtime
from runbot.app.runtime import AppRuntime

__all__ = ["AppRuntime", "build_runtime"]
