"""
NodeBar Configuration
Styling attributes for the node progress bar and display scale factors
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidInputError
from .types import DistributionMode, IconRef, TextAlign


@dataclass(frozen=True)
class DisplayMetrics:
    """
    Scale factors for density-independent units

    Replaces any lookup of a platform display singleton: every conversion
    goes through the values held here.
    """

    density: float = 1.0
    """Pixels per dp"""

    scaled_density: float = 1.0
    """Pixels per sp (density times the user font scale)"""

    def __post_init__(self) -> None:
        if self.density <= 0 or self.scaled_density <= 0:
            raise InvalidInputError(
                f"Display densities must be positive, got "
                f"density={self.density}, scaled_density={self.scaled_density}"
            )

    def dp(self, value: float) -> int:
        """Convert dp to whole pixels"""
        return int(round(value * self.density))

    def sp(self, value: float) -> float:
        """Convert sp to pixels"""
        return value * self.scaled_density


@dataclass
class BarStyle:
    """
    Visual attributes of the node progress bar

    Field defaults mirror the widget's attribute defaults.
    """

    # ============================================================
    # BAR
    # ============================================================
    thickness_dp: float = 10
    """Bar thickness (dp)"""

    start_color: str = 'green'
    """Gradient color at the left edge of the fill"""

    end_color: str = 'green'
    """Gradient color at the right edge of the fill"""

    background_color: str = 'lightgray'
    """Color of the unfilled bar"""

    mode: DistributionMode = DistributionMode.SPACE_AROUND
    """Node distribution mode"""

    # ============================================================
    # NODE ICONS
    # ============================================================
    active_icon: Optional[IconRef] = None
    """Default icon for reached nodes"""

    inactive_icon: Optional[IconRef] = None
    """Default icon for nodes not yet reached"""

    # ============================================================
    # LABELS
    # ============================================================
    text_size_sp: float = 16.0
    """Label text size (sp)"""

    text_color: str = 'black'
    """Label text color"""

    text_margin_dp: float = 8
    """Distance from the bar center to the label baseline (dp)"""

    text_align: TextAlign = TextAlign.BOTTOM
    """Draw labels above ('top') or below ('bottom') the bar"""

    # ============================================================
    # OUTPUT
    # ============================================================
    metrics: DisplayMetrics = field(default_factory=DisplayMetrics)
    """Density scale factors used for dp/sp conversion"""

    dpi: int = 100
    """Figure DPI used by the renderer"""

    ATTRIBUTES = {
        'npb_thickness': 'thickness_dp',
        'npb_start_color': 'start_color',
        'npb_end_color': 'end_color',
        'npb_background_color': 'background_color',
        'npb_node_active': 'active_icon',
        'npb_node_inactive': 'inactive_icon',
        'npb_text_size': 'text_size_sp',
        'npb_text_color': 'text_color',
        'npb_text_margin': 'text_margin_dp',
        'npb_text_align': 'text_align',
        'npb_mode': 'mode',
    }

    def __post_init__(self) -> None:
        self.mode = DistributionMode.parse(self.mode)
        self.text_align = TextAlign.parse(self.text_align)
        if self.thickness_dp < 0:
            raise InvalidInputError(f"Bar thickness must be >= 0, got {self.thickness_dp}")

    @property
    def thickness_px(self) -> int:
        return self.metrics.dp(self.thickness_dp)

    @property
    def text_size_px(self) -> float:
        return self.metrics.sp(self.text_size_sp)

    @property
    def text_margin_px(self) -> int:
        return self.metrics.dp(self.text_margin_dp)

    def with_changes(self, **changes: Any) -> 'BarStyle':
        """Copy of this style with some fields replaced"""
        return replace(self, **changes)

    # ============================================================
    # CONSTRUCTORS
    # ============================================================

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, Any],
        metrics: Optional[DisplayMetrics] = None
    ) -> 'BarStyle':
        """
        Build a style from widget attribute names

        Example:
            >>> style = BarStyle.from_attributes({'npb_thickness': 6, 'npb_mode': 'spaceBetween'})

        Raises:
            InvalidInputError: on attribute names the widget does not define
        """
        unknown = sorted(set(attributes) - set(cls.ATTRIBUTES))
        if unknown:
            raise InvalidInputError(f"Unknown style attributes: {unknown}")
        kwargs: Dict[str, Any] = {cls.ATTRIBUTES[k]: v for k, v in attributes.items()}
        if metrics is not None:
            kwargs['metrics'] = metrics
        return cls(**kwargs)

    @classmethod
    def default(cls) -> 'BarStyle':
        return cls()

    @classmethod
    def preview(cls) -> 'BarStyle':
        """
        Colourful style used for the demo/preview rendering

        - Green to blue gradient
        - Slightly thicker bar
        """
        return cls(
            thickness_dp=12,
            start_color='#4CAF50',
            end_color='#2196F3',
            background_color='#E0E0E0',
            text_size_sp=12.0,
            text_color='#333333',
            text_margin_dp=22,
        )

    @classmethod
    def high_density(cls, density: float = 3.0) -> 'BarStyle':
        """
        Style for high density output (e.g. xxhdpi screens)

        Example:
            >>> style = BarStyle.high_density(2.0)
            >>> style.thickness_px
            20
        """
        return cls(metrics=DisplayMetrics(density=density, scaled_density=density))
