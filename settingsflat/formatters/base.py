from __future__ import annotations
from typing import List

from ..core.models import FlatMapping


class FormatterPlugin:
    """
    Base class for output formatters. Subclasses set NAME (the value accepted
    by --format), optional ALIASES and DESCRIPTION, and implement render().
    """
    NAME: str = "base"
    ALIASES: List[str] = []
    DESCRIPTION: str = ""

    def render(self, mapping: FlatMapping, *, slot_setting: bool = False) -> str:
        raise NotImplementedError("render must be implemented in subclasses")
