"""
Node progress bar renderer

Draws the geometry computed by LayoutEngine onto a matplotlib figure.
Screen coordinates are used throughout: origin at the top left, y down.
"""

from __future__ import annotations
from typing import Optional
from pathlib import Path
import logging

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure

from .config import BarStyle
from .icons import IconCache, icon_size
from .layout import LayoutEngine
from .layout.types import GradientSpec, LayoutResult

logger = logging.getLogger(__name__)

GRADIENT_STEPS = 256


class NodeBarRenderer:
    """
    Renders a node progress bar

    Redraw requests coming from the engine only mark the renderer dirty;
    any number of requests between two draws result in a single draw.
    """

    def __init__(self, engine: LayoutEngine, icon_cache: Optional[IconCache] = None) -> None:
        """
        Initialize renderer

        Args:
            engine: Layout engine providing geometry
            icon_cache: Icon source; without one no icons are drawn

        Example:
            >>> engine = LayoutEngine(BarStyle.preview())
            >>> renderer = NodeBarRenderer(engine)
            >>> engine.set_size(600, 120)
        """
        self.engine = engine
        self.icon_cache = icon_cache
        self.dirty = True
        self.draw_count = 0
        self.figure: Optional[Figure] = None
        previous_hook = engine.on_invalidate

        def on_invalidate() -> None:
            self.request_redraw()
            if previous_hook is not None:
                previous_hook()

        engine.on_invalidate = on_invalidate
        if icon_cache is not None:
            # Default icons are decoded up front
            icon_cache.preload(self.style.active_icon, self.style.inactive_icon)

    @property
    def style(self) -> BarStyle:
        """Current style of the engine, read at draw time"""
        return self.engine.style

    def request_redraw(self) -> None:
        self.dirty = True

    def render_if_dirty(self) -> Optional[Figure]:
        """Draw only if something changed since the last draw"""
        if not self.dirty:
            return self.figure
        return self.draw()

    def _new_axes(self) -> Axes:
        dpi = self.style.dpi
        width = max(self.engine.width, 1)
        height = max(self.engine.height, 1)
        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        return fig.add_axes([0, 0, 1, 1])

    def draw(self, ax: Optional[Axes] = None) -> Figure:
        """
        Draw background, fill, icons and labels

        Args:
            ax: Axes to draw into; a figure sized to the container is created if None

        Returns:
            matplotlib Figure object
        """
        if ax is None:
            if self.figure is not None:
                plt.close(self.figure)
            ax = self._new_axes()
        engine = self.engine

        self._draw_background(ax)
        if engine.has_nodes:
            result = engine.layout()
            self._draw_fill(ax, result)
            self._draw_nodes(ax, result)
        else:
            logger.debug("No nodes set, drawing background only")

        ax.set_xlim(0, max(engine.width, 1))
        ax.set_ylim(max(engine.height, 1), 0)
        ax.set_aspect('auto')
        ax.axis('off')

        self.figure = ax.figure
        self.dirty = False
        self.draw_count += 1
        return self.figure

    def _draw_background(self, ax: Axes) -> None:
        engine = self.engine
        thickness = self.style.thickness_px
        ax.add_patch(patches.Rectangle(
            (engine.padding_left, engine.center_y - thickness / 2),
            engine.usable_width,
            thickness,
            facecolor=self.style.background_color,
            edgecolor='none',
            zorder=1
        ))

    def _draw_fill(self, ax: Axes, result: LayoutResult) -> None:
        fill = result.fill
        if fill.is_empty:
            return
        cmap = gradient_colormap(result.gradient)
        gradient = np.linspace(0, 1, GRADIENT_STEPS).reshape(1, -1)
        ax.imshow(
            gradient,
            cmap=cmap,
            extent=(fill.left, fill.right, fill.bottom, fill.top),
            aspect='auto',
            interpolation='bilinear',
            zorder=2
        )

    def _draw_nodes(self, ax: Axes, result: LayoutResult) -> None:
        engine = self.engine
        fontsize = self.style.text_size_px * 72 / self.style.dpi
        for placement in result.nodes:
            node = engine.nodes[placement.index]
            if self.icon_cache is not None:
                image = self.icon_cache.icon_for(
                    node,
                    placement.active,
                    self.style.active_icon,
                    self.style.inactive_icon
                )
                if image is not None:
                    w, h = icon_size(image)
                    left, top = engine.icon_position(placement.index, w, h)
                    ax.imshow(image, extent=(left, left + w, top + h, top), zorder=3)
            ax.text(
                placement.x,
                placement.label_y,
                placement.text,
                ha='center',
                va='baseline',
                fontsize=fontsize,
                color=self.style.text_color,
                zorder=4
            )

    def save(self, output_file: str) -> Figure:
        """Draw if needed and save to file"""
        fig = self.render_if_dirty()
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_file, dpi=self.style.dpi)
        logger.info(f"Saved {output_file}")
        return fig

    def close(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None
            self.dirty = True


def gradient_colormap(gradient: GradientSpec) -> LinearSegmentedColormap:
    """Two-color colormap running from the gradient's start to end color"""
    return LinearSegmentedColormap.from_list(
        'nodebar_fill', [gradient.start_color, gradient.end_color]
    )
