"""
Layout types for NodeBar
Data structures for layout engine results

All types are immutable (frozen) for safety and testability.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import pandas as pd

from ..types import DistributionMode


@dataclass(frozen=True)
class FillRect:
    """
    Highlighted part of the bar

    Attributes:
        left: Left edge, always the left padding edge (px)
        top: Top edge (px, y grows downwards)
        right: Right edge, padding_left + fill length + reference node offset (px)
        bottom: Bottom edge (px)
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        """Signed width; negative when progress extrapolates below the first anchor"""
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        """Whether there is nothing to draw"""
        return self.right <= self.left

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class GradientSpec:
    """
    Linear gradient painted over the fill rectangle

    Interpolates start_color at (x0, y0) to end_color at (x1, y1).
    """
    x0: float
    y0: float
    x1: float
    y1: float
    start_color: str
    end_color: str

    @classmethod
    def over(cls, rect: FillRect, start_color: str, end_color: str) -> 'GradientSpec':
        return cls(rect.left, rect.top, rect.right, rect.bottom, start_color, end_color)


@dataclass(frozen=True)
class NodePlacement:
    """
    Where one node is drawn

    Attributes:
        index: Position of the node in the node list
        text: Node label
        anchor_x: Anchor x including left padding, without node offset (px)
        x: anchor_x plus the node's own offset (px)
        label_y: Label baseline (px)
        active: Whether progress has reached the node
    """
    index: int
    text: str
    anchor_x: float
    x: float
    label_y: float
    active: bool


@dataclass(frozen=True)
class LayoutResult:
    """
    Complete geometry for one draw pass

    This is the output of LayoutEngine.layout() and the input to the renderer
    and the geometry writer.
    """
    mode: DistributionMode
    part: float
    usable_width: float
    center_y: float
    progress: int
    fill: FillRect
    gradient: GradientSpec
    nodes: List[NodePlacement] = field(default_factory=list)
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_nodes(self) -> int:
        return len(self.nodes)

    @property
    def n_active(self) -> int:
        """Number of nodes drawn as active"""
        return sum(1 for n in self.nodes if n.active)

    def to_frame(self) -> pd.DataFrame:
        """Per-node geometry as a DataFrame (one row per node)"""
        columns = ['index', 'text', 'anchor_x', 'x', 'label_y', 'active']
        return pd.DataFrame(
            [[getattr(p, c) for c in columns] for p in self.nodes],
            columns=columns
        )
