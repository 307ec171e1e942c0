"""Command-line subcommands for NodeBar"""
