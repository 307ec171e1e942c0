"""
Core data types for NodeBar

Nodes, distribution modes and label alignment.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .exceptions import InvalidInputError

IconRef = Union[str, int]


class DistributionMode(Enum):
    """
    How node anchors are spread over the usable width

    Values are the attribute names used by the widget styling.
    """
    SPACE_BETWEEN = 'spaceBetween'
    SPACE_AROUND = 'spaceAround'
    SPACE_EVENLY = 'spaceEvenly'

    @classmethod
    def parse(cls, value: Union['DistributionMode', str]) -> 'DistributionMode':
        """
        Resolve a mode from an enum member, attribute name or member name

        Raises:
            InvalidInputError: for anything that is not a known mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if value == mode.value or value.upper() == mode.name:
                    return mode
        raise InvalidInputError(
            f"Unknown distribution mode: {value!r}. "
            f"Use one of {[m.value for m in cls]}"
        )


class TextAlign(Enum):
    """Label placement relative to the bar"""
    TOP = 'top'
    BOTTOM = 'bottom'

    @classmethod
    def parse(cls, value: Union['TextAlign', str, int]) -> 'TextAlign':
        if isinstance(value, cls):
            return value
        # Legacy integer values: 1 = top, 2 = bottom
        legacy = {1: cls.TOP, 2: cls.BOTTOM}
        if isinstance(value, int) and not isinstance(value, bool) and value in legacy:
            return legacy[value]
        if isinstance(value, str):
            for align in cls:
                if value.lower() == align.value:
                    return align
        raise InvalidInputError(f"Unknown text alignment: {value!r}. Use 'top' or 'bottom'")


@dataclass(frozen=True)
class Node:
    """
    A milestone on the progress bar

    Attributes:
        text: Label drawn next to the node
        offset: Horizontal shift of the node in pixels (signed)
        active_icon: Icon shown once the node is reached (None = style default)
        inactive_icon: Icon shown before the node is reached (None = style default)
    """
    text: str = ""
    offset: int = 0
    active_icon: Optional[IconRef] = None
    inactive_icon: Optional[IconRef] = None

    def icon_for(self, active: bool) -> Optional[IconRef]:
        """Icon reference set on this node for the given state"""
        return self.active_icon if active else self.inactive_icon
