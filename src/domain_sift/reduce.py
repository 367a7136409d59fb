from typing import Any, Iterator, MutableMapping

__all__ = [
    "ancestors",
    "reduce_domains",
]


def ancestors(domain: str) -> Iterator[str]:
    """Yield the parent domains of `domain`, shortest first, TLD excluded.

    ex) list(ancestors("deep.sub.example.com")) -> ["example.com", "sub.example.com"]
    ex) list(ancestors("example.com")) -> []
    """
    index = domain.rfind(".", 0, max(domain.rfind("."), 0))
    while index != -1:
        yield domain[index + 1 :]
        index = domain.rfind(".", 0, index)


def reduce_domains(domains: MutableMapping[str, Any]) -> dict[str, str]:
    """Remove every domain a wildcard on another listed domain already covers.

    `domains` is modified in place. Returns {removed: covering parent}.

    The covering parent is the shortest listed ancestor. Since that ancestor
    has no listed ancestor of its own it is never removed, so the result does
    not depend on iteration order.

    ex) d = dict.fromkeys(["example.com", "sub.example.com"])
        reduce_domains(d) -> {"sub.example.com": "example.com"}
        d -> {"example.com": None}
    """
    redundant = {}
    for domain in list(domains):
        for parent in ancestors(domain):
            if parent in domains:
                del domains[domain]
                redundant[domain] = parent
                break
    return redundant
