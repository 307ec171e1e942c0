"""
NodeBar CLI

Command-line interface with subcommands for rendering and layout.
"""

import argparse
import sys
from .cli import layout, render


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='nodebar',
        description='NodeBar: progress bars annotated with milestone nodes'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    render.add_parser(subparsers)
    layout.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'render':
        render.run(args)
    elif args.command == 'layout':
        layout.run(args)


if __name__ == "__main__":
    main()
