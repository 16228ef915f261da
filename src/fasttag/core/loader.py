# src/fasttag/core/loader.py
"""
Read lexicon text from disk.
"""

import logging
from pathlib import Path

from fasttag import config
from fasttag.core.lexicon import Lexicon


log = logging.getLogger(__name__)


def read_lexicon_text(path: str | Path) -> str:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Lexicon not found: {path}")
    return p.read_text(encoding="utf-8")


def load_lexicon(path: str | Path) -> Lexicon:
    lexicon = Lexicon(read_lexicon_text(path))
    log.info("loaded %d words from %s", len(lexicon), path)
    return lexicon


def load_default_lexicon() -> Lexicon:
    return load_lexicon(config.LEXICON_PATH)
