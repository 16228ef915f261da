"""
Lexicon commands.
"""

import sys
from pathlib import Path

from fasttag.cli import client
from fasttag.cli.commands.tag import build_tagger
from fasttag.config import DEFAULT_LEXICON_NAME


def add_subparser(subparsers):
    parser = subparsers.add_parser("lexicon", help="Lexicon tools")
    lex_sub = parser.add_subparsers(dest="lexicon_command", required=True)

    # check (local file, or a stored lexicon with --remote)
    check_p = lex_sub.add_parser("check", help="Check whether a word is in a lexicon")
    check_p.add_argument("word", help="Word to look up")
    check_p.add_argument("-l", "--lexicon", help="Lexicon file (default: configured lexicon)")
    check_p.add_argument("--remote", action="store_true", help="Ask the server instead")
    check_p.add_argument("--name", default=DEFAULT_LEXICON_NAME, help="Stored lexicon name for --remote")
    check_p.set_defaults(func=lexicon_check)

    # add (from file)
    add_p = lex_sub.add_parser("add", help="Upload a lexicon file to the server")
    add_p.add_argument("file", help="Path to lexicon file")
    add_p.add_argument("--name", help="Lexicon name (default: filename)")
    add_p.set_defaults(func=lexicon_add)

    # list
    list_p = lex_sub.add_parser("list", help="List stored lexicons")
    list_p.set_defaults(func=lexicon_list)

    # show
    show_p = lex_sub.add_parser("show", help="Show a stored lexicon")
    show_p.add_argument("name", help="Lexicon name")
    show_p.set_defaults(func=lexicon_show)

    # delete
    del_p = lex_sub.add_parser("delete", help="Delete a stored lexicon")
    del_p.add_argument("name", help="Lexicon name")
    del_p.set_defaults(func=lexicon_delete)


def lexicon_check(args):
    if args.remote:
        try:
            result = client.check_word(args.name, args.word)
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        found, tags = result["in_lexicon"], result["tags"]
    else:
        try:
            lexicon = build_tagger(args.lexicon).lexicon
        except FileNotFoundError as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        found, tags = lexicon.contains(args.word), lexicon.tags(args.word)

    if found:
        print(f"✓ {args.word}: {' '.join(tags) if tags else '(no tags)'}")
    else:
        print(f"✗ {args.word}: not in lexicon")


def lexicon_add(args):
    path = Path(args.file)
    if not path.exists():
        print(f"✗ File not found: {args.file}")
        sys.exit(1)

    text = path.read_text(encoding="utf-8")
    name = args.name or path.stem

    try:
        result = client.create_lexicon(name, text)
        print(f"✓ Stored lexicon: {result['name']}")
        print(f"  words: {result['word_count']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_list(args):
    try:
        lexicons = client.list_lexicons()
        if not lexicons:
            print("No lexicons.")
            return
        for lex in lexicons:
            print(f"{lex['name']:20}  {lex['word_count']:6d} words  {lex['created_at']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_show(args):
    try:
        lex = client.get_lexicon(args.name)
        print(f"Name: {lex['name']}")
        print(f"Words: {lex['word_count']}")
        print(f"Created: {lex['created_at']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_delete(args):
    try:
        client.delete_lexicon(args.name)
        print(f"✓ Deleted: {args.name}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
