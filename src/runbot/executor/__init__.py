"""Remote code execution backends."""

from runbot.executor.piston import DEFAULT_API_BASE, PistonExecutor, parse_execute_response

__all__ = ["DEFAULT_API_BASE", "PistonExecutor", "parse_execute_response"]
