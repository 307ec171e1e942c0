"""Arguments and setup shared by the render and layout subcommands"""

from __future__ import annotations
from typing import List
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace

from ..config import BarStyle, DisplayMetrics
from ..data import PREVIEW_NODES, PREVIEW_PROGRESS
from ..io import read_nodes
from ..layout import LayoutEngine
from ..types import DistributionMode, Node, TextAlign

logger = logging.getLogger(__name__)


def add_input_arguments(parser: ArgumentParser) -> None:
    """Node source, progress, container size and style options"""
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--nodes',
                        help='TSV file with columns text, offset, active_icon, inactive_icon')
    source.add_argument('--demo', action='store_true',
                        help='Use the three preview nodes at progress 2')

    parser.add_argument('--progress', type=int,
                        help='Number of reached nodes (default: 0, or 2 with --demo)')
    parser.add_argument('--width', type=int, default=600,
                        help='Container width in px (default: 600)')
    parser.add_argument('--height', type=int, default=120,
                        help='Container height in px (default: 120)')
    parser.add_argument('--padding-left', type=int, default=0,
                        help='Left padding in px (default: 0)')
    parser.add_argument('--padding-right', type=int, default=0,
                        help='Right padding in px (default: 0)')
    parser.add_argument('--mode', choices=[m.value for m in DistributionMode],
                        default=DistributionMode.SPACE_AROUND.value,
                        help='Node distribution mode (default: spaceAround)')
    parser.add_argument('--text-align', choices=[a.value for a in TextAlign],
                        default=TextAlign.BOTTOM.value,
                        help='Draw labels above or below the bar (default: bottom)')
    parser.add_argument('--density', type=float, default=1.0,
                        help='Pixels per dp/sp (default: 1.0)')
    parser.add_argument('--start-color', help='Fill gradient start color')
    parser.add_argument('--end-color', help='Fill gradient end color')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def configure_logging(args: Namespace) -> None:
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def load_nodes(args: Namespace) -> List[Node]:
    nodes_file = PREVIEW_NODES if args.demo else args.nodes
    if not Path(nodes_file).exists():
        raise FileNotFoundError(f"Nodes file not found: {nodes_file}")
    nodes = read_nodes(nodes_file)
    logger.info(f"Loaded {len(nodes)} nodes from {nodes_file}")
    return nodes


def build_style(args: Namespace) -> BarStyle:
    style = BarStyle.preview() if args.demo else BarStyle.default()
    changes = {
        'mode': DistributionMode.parse(args.mode),
        'text_align': TextAlign.parse(args.text_align),
        'metrics': DisplayMetrics(density=args.density, scaled_density=args.density),
    }
    if args.start_color:
        changes['start_color'] = args.start_color
    if args.end_color:
        changes['end_color'] = args.end_color
    return style.with_changes(**changes)


def build_engine(args: Namespace) -> LayoutEngine:
    """
    Engine primed with size, nodes and progress from the command line

    Returns:
        LayoutEngine ready for layout() or rendering
    """
    engine = LayoutEngine(build_style(args))
    engine.set_size(args.width, args.height, args.padding_left, args.padding_right)
    engine.set_nodes(load_nodes(args))

    progress = args.progress
    if progress is None:
        progress = PREVIEW_PROGRESS if args.demo else 0
    engine.set_progress(progress)
    return engine
