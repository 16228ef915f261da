# src/fasttag/core/lexicon.py
"""
Lexicon for part-of-speech lookup.

Maps surface words to an ordered list of candidate tags.
"dog NN NNS" → "dog" has default tag "NN", alternative "NNS".

Built once from lexicon text, read-only afterwards.
"""

import logging
from typing import Iterable, Iterator


log = logging.getLogger(__name__)


class Lexicon:
    def __init__(self, text: str | None = ""):
        self._entries: dict[str, tuple[str, ...]] = {}
        self.skipped = 0

        if text:
            self._load(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))

        log.debug("lexicon built: %d entries, %d lines skipped", len(self._entries), self.skipped)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Lexicon":
        lexicon = cls()
        lexicon._load(lines)
        return lexicon

    def _load(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._parse_line(line)

    def _parse_line(self, line: str) -> None:
        """Parse `word tag1 tag2 ...`. Later lines replace earlier ones."""
        fields = line.rstrip("\r\n").split(" ")
        word = fields[0]
        if not word:
            self.skipped += 1
            return
        self._entries[word] = tuple(fields[1:])

    def contains(self, word: str) -> bool:
        return word in self._entries or word.lower() in self._entries

    def tags(self, word: str) -> tuple[str, ...] | None:
        """
        Candidate tags for a word, exact case first, then lowercased.

        The first key that exists wins, even if it has no tags.
        """
        for key in (word, word.lower()):
            if key in self._entries:
                return self._entries[key]
        return None

    def primary_tag(self, word: str) -> str | None:
        """Default tag for a word; None if absent or the entry has no tags."""
        tags = self.tags(word)
        if not tags:
            return None
        return tags[0]

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
