"""
Prompt management for Shelly.

This module provides the prompt templates and the builders for each mode.
"""

from .registry import (
    PromptRegistry,
    PromptTemplate,
    PromptType,
    build_command_prompt,
    build_debug_prompt,
    build_question_prompt,
    get_registry,
)

__all__ = [
    "PromptRegistry",
    "PromptTemplate",
    "PromptType",
    "build_command_prompt",
    "build_debug_prompt",
    "build_question_prompt",
    "get_registry",
]
