"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: clients/__init__.py.
"""

from .contracts import CompletionTransport
from .openai import OpenAIChatTransport, first_choice_text, to_remote_error

__all__ = [
    "CompletionTransport",
    "OpenAIChatTransport",
    "first_choice_text",
    "to_remote_error",
]
