"""
general.
=======

Shared general-purpose modules used across the detection stack
(config loading and topic-gated debug logging live in `general.utils`).
"""

__all__: list[str] = []
