"""Find domains inside strings.

    from domain_sift.match import DomainMatcher

    matcher = DomainMatcher()
    matcher.match_first("see example.com")            # -> "example.com"
    matcher.match_all("a.com b.org a.com")            # -> ["a.com", "b.org", "a.com"]
    matcher.extract_line_first("0.0.0.0 ads.example.com\\n")  # -> "ads.example.com"
"""

import re
from functools import cache
from typing import Iterator, Optional

from .charset import has_invalid_underscore
from .config import LIMITS
from .tlds import TLDTable, load_tlds

__all__ = [
    "LABELS_PATTERN",
    "TLD_PATTERN",
    "DomainMatcher",
    "default_matcher",
    "match_first",
    "match_all",
    "extract_line_first",
    "extract_line_all",
]

# Possessive quantifiers (++, *+) never give characters back once a label is
# consumed, so a rejected candidate cannot trigger catastrophic backtracking.
LABELS_PATTERN = re.compile(
    r"""
    \b
    (?:
        # 1-63 label characters, a dot, and the start of the next label.
        # A dot not followed by a label (FQDN root) is left unconsumed.
        (?= [a-z0-9_-]{1,63} \. [a-z0-9_-] )
        [a-z0-9_]++
        (?: [-_]*+ [a-z0-9]++ )*+
        \.
    )++
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)

TLD_PATTERN = re.compile(
    r"""
    (?:
        xn-- [a-z0-9-]{2,59}
      | [a-z]{2,63}
    )
    \b
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)

BLANK_OR_COMMENT = re.compile(r"\A\s*(?:\#|\Z)", re.ASCII)
# hosts-file style "127.0.0.1 example.com"
LEADING_ADDRESS = re.compile(r"\A\s*(?:127\.0\.0\.1|0\.0\.0\.0)\s*", re.ASCII)
# "example.com127.0.0.1": the address is glued to a word
GLUED_ADDRESS = re.compile(r"\B(?:127\.0\.0\.1|0\.0\.0\.0)", re.ASCII)


def _strip_line_ending(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


class DomainMatcher:
    """Match domains with a valid TLD and well-placed underscores.

    Every instance shares the package TLD table unless another one is given.
    """

    __slots__ = ("tlds",)

    def __init__(self, tlds: Optional[TLDTable] = None):
        self.tlds = tlds if tlds is not None else load_tlds()

    def is_valid_tld(self, candidate: str) -> bool:
        return self.tlds.is_valid(candidate)

    def _accepts(self, domain: str) -> bool:
        return (
            len(domain) <= LIMITS.max_domain_len
            and not has_invalid_underscore(domain)
            and self.tlds.has_valid_tld(domain)
        )

    def iter_matches(self, text: str) -> Iterator[str]:
        """Yield lowercase domains found in `text`, left to right.

        Candidates rejected for their TLD, length or underscores are skipped
        and the scan resumes after them.

        Scanning is linear: a label run with no TLD after it is skipped as a
        whole, since any later start inside it consumes the same labels and
        stops at the same place.
        """
        pos = 0
        while True:
            labels = LABELS_PATTERN.search(text, pos)
            if labels is None:
                return
            tld = TLD_PATTERN.match(text, labels.end())
            if tld is None:
                pos = labels.end()
                continue
            domain = text[labels.start() : tld.end()].lower()
            if self._accepts(domain):
                yield domain
            pos = tld.end()

    def match_first(self, text: str) -> Optional[str]:
        """ex) match_first("EXAMPLE.COM") -> "example.com"
        ex) match_first("example.com.") -> "example.com"
        ex) match_first("foo_bar.example.com") -> None
        """
        return next(self.iter_matches(text), None)

    def match_all(self, text: str) -> list[str]:
        """Return every domain in `text`; duplicates and order are kept.

        ex) match_all("a.com b.org a.com") -> ["a.com", "b.org", "a.com"]
        ex) match_all("nothing here") -> []
        """
        return list(self.iter_matches(text))

    def _prepare_line(self, line: str) -> Optional[str]:
        line = _strip_line_ending(line)
        if BLANK_OR_COMMENT.match(line):
            return None
        line = LEADING_ADDRESS.sub("", line, count=1)
        if GLUED_ADDRESS.search(line):
            return None
        return line.lower()

    def extract_line_first(self, line: str) -> Optional[str]:
        """Return the first domain on a blocklist or hosts-file line.

        Comments and blank lines yield None, as do lines where a loopback
        or null address is glued onto another word.

        ex) extract_line_first("127.0.0.1 example.com\\n") -> "example.com"
        ex) extract_line_first("example.com127.0.0.1") -> None
        ex) extract_line_first("# example.com") -> None
        """
        line = self._prepare_line(line)
        if line is None:
            return None
        return self.match_first(line)

    def extract_line_all(self, line: str) -> list[str]:
        """Like extract_line_first, but returns every domain on the line."""
        line = self._prepare_line(line)
        if line is None:
            return []
        return self.match_all(line)


@cache
def default_matcher() -> DomainMatcher:
    return DomainMatcher()


def match_first(text: str) -> Optional[str]:
    return default_matcher().match_first(text)


def match_all(text: str) -> list[str]:
    return default_matcher().match_all(text)


def extract_line_first(line: str) -> Optional[str]:
    return default_matcher().extract_line_first(line)


def extract_line_all(line: str) -> list[str]:
    return default_matcher().extract_line_all(line)
