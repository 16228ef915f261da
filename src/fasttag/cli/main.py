"""
FastTag CLI.
"""

import argparse

from fasttag.cli.commands import lexicon, repl, tag
from fasttag.log import configure_logging


def main():
    parser = argparse.ArgumentParser(prog="fasttag", description="FastTag CLI")
    parser.add_argument("--log-level", help="Override FASTTAG_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    tag.add_subparser(subparsers)
    repl.add_subparser(subparsers)
    lexicon.add_subparser(subparsers)

    args = parser.parse_args()
    configure_logging(args.log_level)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
