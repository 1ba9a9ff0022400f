"""
Typed settings for response assertions.

This module contains the dataclass holding the knobs that control how
wrappers read values from responses and render failure messages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AssertionSettings:
    """
    Settings shared by all response wrappers.

    Attributes:
        model_key: Template context key holding the view model
        session_key: Request scope key holding the session used as temp data
        max_value_length: Values longer than this are truncated in messages
    """
    model_key: str = "model"
    session_key: str = "session"
    max_value_length: int = 100
