"""
Interactive tagging loop.

Reads one sentence per line and prints a [word tag] line per token,
until the line "[x]" or end of input.
"""

import sys
from typing import Callable

from rich.console import Console

from fasttag.cli.commands.tag import build_tagger
from fasttag.core.tagged_lang import format_token
from fasttag.core.tagger import Tagger

console = Console()

EXIT_COMMAND = "[x]"


def add_subparser(subparsers):
    parser = subparsers.add_parser("repl", help="Tag sentences interactively.")
    parser.add_argument("-l", "--lexicon", help="Lexicon file (default: configured lexicon)")
    parser.set_defaults(func=run)


def repl_loop(tagger: Tagger, read: Callable[[], str] = input, write: Callable[[str], None] = print) -> int:
    """Returns the number of sentences tagged."""
    count = 0
    while True:
        try:
            sentence = read()
        except EOFError:
            break
        if sentence == EXIT_COMMAND:
            break

        for token in tagger.tag_sentence(sentence):
            write(format_token(token))
        count += 1
    return count


def run(args):
    try:
        tagger = build_tagger(args.lexicon)
    except FileNotFoundError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    console.print("[bold]Welcome to FastTag[/bold]")
    console.print(f"[dim]Enter an English sentence and watch it being tagged ({EXIT_COMMAND} to quit)[/dim]")

    repl_loop(tagger)

    print("Bye Bye!")
