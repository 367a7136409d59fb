"""Top-level domain table.

The reference list follows https://data.iana.org/TLD/tlds-alpha-by-domain.txt
and ships with the package as ``tlds.txt``. It is read once and shared by
every matcher.
"""

from functools import cache
from importlib import resources
from pathlib import Path
from typing import Iterable

from .config import LIMITS

__all__ = [
    "TLDTable",
    "TLDTableError",
    "load_tlds",
    "is_valid_tld",
]


class TLDTableError(RuntimeError):
    """The TLD reference list is missing, unreadable or implausibly small."""


class TLDTable:
    """Immutable set of upper-cased top-level domains."""

    __slots__ = ("_tlds",)

    def __init__(self, tlds: Iterable[str], min_count: int = LIMITS.min_tld_count):
        self._tlds = frozenset(tlds)
        if len(self._tlds) < min_count:
            raise TLDTableError(
                f"TLD list appears corrupted: only {len(self._tlds)} TLDs "
                f"loaded (expected at least {min_count})"
            )

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], min_count: int = LIMITS.min_tld_count
    ) -> "TLDTable":
        """Parse IANA-style lines: one TLD each, blank and '#' lines skipped.

        ex) TLDTable.from_lines(["# header", "com", " Org\\r\\n"], min_count=2)
            holds {"COM", "ORG"}
        """
        tlds = []
        for line in lines:
            tld = line.strip()
            if not tld or tld.startswith("#"):
                continue
            tlds.append(tld.upper())
        return cls(tlds, min_count=min_count)

    @classmethod
    def from_file(
        cls, path: str | Path, min_count: int = LIMITS.min_tld_count
    ) -> "TLDTable":
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                return cls.from_lines(f, min_count=min_count)
        except OSError as e:
            raise TLDTableError(f"Cannot open TLD file '{path}': {e}") from e

    def __len__(self) -> int:
        return len(self._tlds)

    def __contains__(self, tld: object) -> bool:
        return isinstance(tld, str) and tld.upper() in self._tlds

    def is_valid(self, tld: str) -> bool:
        """ex) table.is_valid("com") -> True, table.is_valid("") -> False"""
        return bool(tld) and tld.upper() in self._tlds

    def has_valid_tld(self, domain: str) -> bool:
        """Check the label after the last dot.

        ex) table.has_valid_tld("sub.example.com") -> True
        """
        return self.is_valid(domain[domain.rfind(".") + 1 :])


@cache
def load_tlds() -> TLDTable:
    """Return the package TLD table, reading ``tlds.txt`` on first use."""
    source = resources.files(__package__).joinpath("tlds.txt")
    try:
        with source.open(encoding="utf-8") as f:
            return TLDTable.from_lines(f)
    except OSError as e:
        raise TLDTableError(f"Cannot open TLD file '{source}': {e}") from e


def is_valid_tld(candidate: str) -> bool:
    return load_tlds().is_valid(candidate)
