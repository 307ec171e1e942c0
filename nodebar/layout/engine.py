"""
Layout Engine for NodeBar
Pure geometry for a progress bar annotated with nodes

The module is split into:
- Pure functions (pitch, anchors, fill length, fill rectangle)
- LayoutEngine, which only holds inputs and recomputes every derived
  value on demand, so geometry can never go stale after a size or
  node change
"""
from __future__ import annotations
from typing import Callable, Optional, Sequence, Tuple, Union
import logging
import warnings

from ..config import BarStyle
from ..exceptions import InvalidInputError, OutOfRangeProgressWarning
from ..types import DistributionMode, Node, TextAlign
from .types import FillRect, GradientSpec, LayoutResult, NodePlacement

logger = logging.getLogger(__name__)


# ============================================================
# PURE PIPELINE
# ============================================================

def compute_pitch(width: float, n: int, mode: DistributionMode) -> float:
    """
    Segment pitch ("part") between consecutive node anchors

    Args:
        width: Usable width (px)
        n: Number of nodes (>= 1)
        mode: Distribution mode

    Returns:
        Pitch in pixels
    """
    if n < 1:
        raise InvalidInputError(f"Cannot compute pitch for {n} nodes")
    if mode is DistributionMode.SPACE_BETWEEN:
        return float(width) if n <= 1 else width / (n - 1)
    if mode is DistributionMode.SPACE_AROUND:
        return width / n
    if mode is DistributionMode.SPACE_EVENLY:
        return width / (n + 1)
    raise InvalidInputError(f"Unhandled distribution mode: {mode!r}")


def anchor_offset(i: int, part: float, mode: DistributionMode) -> float:
    """Anchor of node i relative to the left padding edge"""
    if mode is DistributionMode.SPACE_BETWEEN:
        return i * part
    if mode is DistributionMode.SPACE_AROUND:
        return (i + 1) * part - part / 2
    if mode is DistributionMode.SPACE_EVENLY:
        return (i + 1) * part
    raise InvalidInputError(f"Unhandled distribution mode: {mode!r}")


def compute_fill_length(
    part: float,
    progress: int,
    mode: DistributionMode,
    n: int,
    width: float
) -> float:
    """
    Length of the highlighted bar before the reference node offset is added

    With a single node the fill always reaches the middle of the bar.
    """
    if n == 1:
        return width / 2
    if mode is DistributionMode.SPACE_BETWEEN:
        return max(0, progress - 1) * part
    if mode is DistributionMode.SPACE_AROUND:
        return progress * part - part / 2
    if mode is DistributionMode.SPACE_EVENLY:
        return progress * part
    raise InvalidInputError(f"Unhandled distribution mode: {mode!r}")


def reference_index(progress: int, n: int) -> int:
    """
    Node whose offset shifts the right edge of the fill

    Clamped into the node list so out-of-range progress extrapolates.
    """
    return min(max(0, progress - 1), n - 1)


def compute_fill(
    part: float,
    progress: int,
    mode: DistributionMode,
    nodes: Sequence[Node],
    width: float,
    padding_left: float,
    center_y: float,
    thickness: float
) -> FillRect:
    """Fill rectangle for the given progress"""
    length = compute_fill_length(part, progress, mode, len(nodes), width)
    offset = nodes[reference_index(progress, len(nodes))].offset
    half = thickness / 2
    return FillRect(
        left=padding_left,
        top=center_y - half,
        right=padding_left + length + offset,
        bottom=center_y + half
    )


def is_active(i: int, progress: int) -> bool:
    """Node i is reached once progress passes it"""
    return progress > i


# ============================================================
# ENGINE
# ============================================================

class LayoutEngine:
    """
    Stateful front end over the pure pipeline

    State machine:
    1. nodes unset (initial): set_progress is a no-op
    2. set_nodes: nodes replaced, progress reset to 0
    3. set_progress: progress moves, fill follows

    Every mutation fires the on_invalidate hook (fire-and-forget).
    """

    def __init__(
        self,
        style: Optional[BarStyle] = None,
        on_invalidate: Optional[Callable[[], None]] = None
    ) -> None:
        """
        Initialize layout engine

        Args:
            style: Bar styling; thickness, colors, labels and default mode
            on_invalidate: Redraw request hook, called after every change
        """
        self.style: BarStyle = style or BarStyle()
        self.on_invalidate = on_invalidate
        self.mode: DistributionMode = self.style.mode
        self.width: float = 0
        self.height: float = 0
        self.padding_left: float = 0
        self.padding_right: float = 0
        self.progress: int = 0
        self._nodes: Optional[Tuple[Node, ...]] = None

        logger.debug(f"LayoutEngine initialized (mode={self.mode.value})")

    # ------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------

    def set_size(
        self,
        width: float,
        height: float,
        padding_left: float = 0,
        padding_right: float = 0
    ) -> None:
        """Update container geometry; pitch and fill follow automatically"""
        if width < 0 or height < 0:
            raise InvalidInputError(f"Container size must be >= 0, got {width}x{height}")
        self.width = width
        self.height = height
        self.padding_left = padding_left
        self.padding_right = padding_right
        logger.debug(f"Container {width}x{height}, padding {padding_left}/{padding_right}")
        if padding_left + padding_right > width:
            logger.warning(f"Padding exceeds width ({width}), usable width clamped to 0")
        self._invalidate()

    def set_mode(self, mode: Union[DistributionMode, str]) -> None:
        self.mode = DistributionMode.parse(mode)
        self._invalidate()

    def set_nodes(self, nodes: Optional[Sequence[Node]]) -> None:
        """
        Replace the node list

        Progress is reset to 0; callers re-issue set_progress afterwards.

        Raises:
            InvalidInputError: if nodes is None or empty
        """
        if not nodes:
            raise InvalidInputError("nodes is empty")
        self._nodes = tuple(nodes)
        self.progress = 0
        logger.info(f"Set {len(self._nodes)} nodes, pitch {self.part:.1f} px ({self.mode.value})")
        self._invalidate()

    def set_progress(self, progress: int) -> None:
        """
        Highlight the first `progress` nodes

        Progress outside [0, node count] is not clamped: a warning is issued
        and the fill is extrapolated.
        """
        if not self._nodes:
            logger.warning(f"set_progress({progress}) ignored: nodes are not set")
            return
        n = len(self._nodes)
        if not 0 <= progress <= n:
            logger.warning(f"Progress {progress} outside [0, {n}], extrapolating")
            warnings.warn(
                f"progress {progress} outside [0, {n}]",
                OutOfRangeProgressWarning,
                stacklevel=2
            )
        self.progress = progress
        logger.debug(f"Progress {progress}: fill right {self.fill_rect.right:.1f} px")
        self._invalidate()

    def _invalidate(self) -> None:
        if self.on_invalidate is not None:
            self.on_invalidate()

    # ------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes or ()

    @property
    def has_nodes(self) -> bool:
        return bool(self._nodes)

    @property
    def usable_width(self) -> float:
        """Width between the paddings, never negative"""
        return max(0, self.width - self.padding_left - self.padding_right)

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def part(self) -> float:
        """Segment pitch; 0 while nodes are unset"""
        if not self._nodes:
            return 0.0
        return compute_pitch(self.usable_width, len(self._nodes), self.mode)

    def anchor_x(self, i: int) -> float:
        """Absolute anchor of node i, without the node's own offset"""
        return self.padding_left + anchor_offset(i, self.part, self.mode)

    def node_x(self, i: int) -> float:
        """Absolute x of node i including its offset"""
        return self.anchor_x(i) + self.nodes[i].offset

    def is_active(self, i: int) -> bool:
        return is_active(i, self.progress)

    def icon_position(self, i: int, icon_width: float, icon_height: float) -> Tuple[float, float]:
        """Top-left corner of an icon centered on node i"""
        return (self.node_x(i) - icon_width / 2, self.center_y - icon_height / 2)

    def label_position(self, i: int) -> Tuple[float, float]:
        """
        Label anchor (horizontal center, baseline) of node i

        The node offset is horizontal only; the baseline depends on the
        text margin and alignment.
        """
        margin = self.style.text_margin_px
        if self.style.text_align is TextAlign.BOTTOM:
            y = self.center_y + margin
        else:
            y = self.center_y - margin
        return (self.node_x(i), y)

    @property
    def fill_rect(self) -> Optional[FillRect]:
        """Fill rectangle for the current progress, None while nodes are unset"""
        if not self._nodes:
            return None
        return compute_fill(
            self.part,
            self.progress,
            self.mode,
            self._nodes,
            self.usable_width,
            self.padding_left,
            self.center_y,
            self.style.thickness_px
        )

    @property
    def gradient(self) -> Optional[GradientSpec]:
        rect = self.fill_rect
        if rect is None:
            return None
        return GradientSpec.over(rect, self.style.start_color, self.style.end_color)

    def layout(self) -> LayoutResult:
        """
        Snapshot of all geometry for one draw pass

        Raises:
            InvalidInputError: if nodes are not set
        """
        if not self._nodes:
            raise InvalidInputError("nodes is empty")
        fill = self.fill_rect
        placements = [
            NodePlacement(
                index=i,
                text=node.text,
                anchor_x=self.anchor_x(i),
                x=self.node_x(i),
                label_y=self.label_position(i)[1],
                active=self.is_active(i)
            )
            for i, node in enumerate(self._nodes)
        ]
        return LayoutResult(
            mode=self.mode,
            part=self.part,
            usable_width=self.usable_width,
            center_y=self.center_y,
            progress=self.progress,
            fill=fill,
            gradient=GradientSpec.over(fill, self.style.start_color, self.style.end_color),
            nodes=placements,
            layout_stats={
                'width': self.width,
                'height': self.height,
                'padding_left': self.padding_left,
                'padding_right': self.padding_right,
                'thickness': self.style.thickness_px,
            }
        )
