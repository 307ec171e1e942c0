"""
Layout Module for NodeBar
Geometry engine for node progress bars

Public API:
    - LayoutEngine: Stateful engine holding bar inputs
    - compute_pitch / anchor_offset / compute_fill_length / compute_fill: Pure pipeline
    - LayoutResult: Complete geometry for one draw pass
    - FillRect, GradientSpec, NodePlacement: Result parts
"""

from .engine import (
    LayoutEngine,
    compute_pitch,
    anchor_offset,
    compute_fill_length,
    compute_fill,
    reference_index,
    is_active,
)
from .types import (
    LayoutResult,
    FillRect,
    GradientSpec,
    NodePlacement,
)

__all__ = [
    'LayoutEngine',
    'compute_pitch',
    'anchor_offset',
    'compute_fill_length',
    'compute_fill',
    'reference_index',
    'is_active',
    'LayoutResult',
    'FillRect',
    'GradientSpec',
    'NodePlacement',
]
