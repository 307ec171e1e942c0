"""Render subcommand - draw the bar to an image"""

from __future__ import annotations
from typing import Optional
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..icons import FileIconLoader, IconCache
from ..renderer import NodeBarRenderer
from .common import add_input_arguments, build_engine, configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add render subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for render subcommand
    """
    parser = subparsers.add_parser(
        'render',
        help='Render the node progress bar to an image'
    )
    add_input_arguments(parser)
    parser.add_argument('-o', '--output', required=True,
                        help='Output image (format from extension, e.g. .png, .svg)')
    parser.add_argument('--icons-dir',
                        help='Directory with icon images referenced by the nodes file')
    parser.add_argument('--active-icon', help='Default icon for reached nodes')
    parser.add_argument('--inactive-icon', help='Default icon for nodes not yet reached')
    parser.add_argument('--dpi', type=int, default=100, help='Output DPI (default: 100)')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute render subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    engine = build_engine(args)
    engine.style = engine.style.with_changes(
        dpi=args.dpi,
        active_icon=args.active_icon,
        inactive_icon=args.inactive_icon
    )

    icon_cache: Optional[IconCache] = None
    if args.icons_dir:
        icon_cache = IconCache(FileIconLoader(args.icons_dir))
        logger.info(f"Icons from {args.icons_dir}")
    elif args.active_icon or args.inactive_icon:
        logger.warning("--active-icon/--inactive-icon ignored without --icons-dir")

    renderer = NodeBarRenderer(engine, icon_cache)
    renderer.save(args.output)
    renderer.close()

    logger.info(f"✓ Rendered {len(engine.nodes)} nodes, progress {engine.progress}: {args.output}")
