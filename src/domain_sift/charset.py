import re

# Labels carry LDH characters plus the underscore of RFC 8552 service labels
# (_dmarc, _tcp, _acme-challenge), which is only allowed at a label start.
INVALID_UNDERSCORE = re.compile(
    r"""
      __                    # doubled
    | [a-z0-9]_[a-z0-9]     # inside a label
    | _\.                   # underscore-only label, or one ending a label
    | [a-z0-9-]_$           # ending the domain
    | (?:^|\.)_-            # "_-" opening a label
    | -_                    # hyphen then underscore
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)


def has_invalid_underscore(domain: str) -> bool:
    """True when `domain` places an underscore anywhere but a label start.

    ex) has_invalid_underscore("_dmarc.example.com") -> False
    ex) has_invalid_underscore("_443._tcp.example.com") -> False
    ex) has_invalid_underscore("foo_bar.example.com") -> True
    ex) has_invalid_underscore("__dmarc.example.com") -> True
    """
    if "_" not in domain:
        return False
    return INVALID_UNDERSCORE.search(domain) is not None
