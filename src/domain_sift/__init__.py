"""domain-sift - extract valid domains from blocklists and reduce them.
Recognizes domains in free text, hosts files and blocklists (TLD checked
against the IANA list, RFC 8552 underscore labels allowed) and collapses
domain sets so a wildcard on a parent covers its subdomains.
"""

from .match import (
    DomainMatcher,
    match_first,
    match_all,
    extract_line_first,
    extract_line_all,
)
from .tlds import (
    TLDTable,
    TLDTableError,
    load_tlds,
    is_valid_tld,
)
from .charset import has_invalid_underscore
from .reduce import reduce_domains
from .formats import render
from .config import FORMATS, LIMITS

__version__ = "0.1.2"

__all__ = [
    "DomainMatcher",
    "match_first",
    "match_all",
    "extract_line_first",
    "extract_line_all",
    "TLDTable",
    "TLDTableError",
    "load_tlds",
    "is_valid_tld",
    "has_invalid_underscore",
    "reduce_domains",
    "render",
    "FORMATS",
    "LIMITS",
]
