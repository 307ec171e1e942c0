"""Layout subcommand - write computed geometry as TSV"""

from __future__ import annotations
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..io import write_geometry
from .common import add_input_arguments, build_engine, configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute node anchors and fill geometry'
    )
    add_input_arguments(parser)
    parser.add_argument('-o', '--output', required=True,
                        help='Output TSV file')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    configure_logging(args)

    engine = build_engine(args)
    result = engine.layout()
    logger.info(f"Pitch {result.part:.1f} px, fill {result.fill.left:.1f}-{result.fill.right:.1f} px")

    write_geometry(result, args.output)
