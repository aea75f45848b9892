"""Enums shared across layers: deployment environment and domain error codes."""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
