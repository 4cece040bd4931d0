"""
User interaction for gitmoji_helper.

Provides the :class:`PromptAdapter` contract and its click based
implementation. See :mod:`gitmoji_helper.prompts.adapter`.
"""

from .adapter import ClickPromptAdapter, PromptAdapter, Validator  # noqa: F401
