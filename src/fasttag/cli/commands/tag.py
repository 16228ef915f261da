"""
Tag a sentence.
"""

import sys

from rich import print_json

from fasttag.cli import client
from fasttag.core.loader import load_default_lexicon, load_lexicon
from fasttag.core.tagged_lang import format_tagged
from fasttag.core.tagger import TaggedToken, Tagger


def add_subparser(subparsers):
    parser = subparsers.add_parser("tag", help="Tag a sentence.")
    parser.add_argument("text", help="Sentence, words separated by spaces.")
    parser.add_argument("-l", "--lexicon", help="Lexicon file (default: configured lexicon)")
    parser.add_argument("--json", action="store_true", help="Print tokens as JSON")
    parser.add_argument("--remote", action="store_true", help="Tag through the API server")
    parser.add_argument("--name", default="default", help="Stored lexicon name (with --remote)")
    parser.set_defaults(func=run)


def build_tagger(path: str | None) -> Tagger:
    lexicon = load_lexicon(path) if path else load_default_lexicon()
    return Tagger(lexicon)


def run(args):
    try:
        if args.remote:
            tokens = [TaggedToken(t["word"], t["tag"]) for t in client.tag_text(args.text, args.name)]
        else:
            tokens = build_tagger(args.lexicon).tag_sentence(args.text)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=[t.to_dict() for t in tokens])
    else:
        print(format_tagged(tokens))
