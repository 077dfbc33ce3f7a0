"""Generation service integration: client protocol, OpenRouter implementation,
and prompt templates.
"""

from maildraft.llm.client import (
    DEFAULT_MODEL,
    NO_ANSWER_PLACEHOLDER,
    ModelClient,
    OpenRouterClient,
    extract_content,
)
from maildraft.llm.prompts import DEFAULT_PROMPT, PROMPT_PRESETS, SYSTEM_PROMPT, USER_PROMPT

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_PROMPT",
    "NO_ANSWER_PLACEHOLDER",
    "PROMPT_PRESETS",
    "SYSTEM_PROMPT",
    "USER_PROMPT",
    "ModelClient",
    "OpenRouterClient",
    "extract_content",
]
