"""Render domain lists for DNS blocking.

plain:   example.com
unbound: local-zone: "example.com" always_refuse
rpz:     example.com CNAME .
         *.example.com CNAME .
"""

import time
from typing import Iterable, Optional

from .config import FORMATS, OutputFormat

__all__ = [
    "get_format",
    "render",
    "render_plain",
    "render_unbound",
    "render_rpz",
]


def get_format(name: str) -> OutputFormat:
    try:
        return FORMATS[name]
    except KeyError:
        choices = ", ".join(FORMATS)
        raise ValueError(f"Unknown format '{name}' (expected one of: {choices})") from None


def render_plain(domains: Iterable[str]) -> str:
    return "".join(f"{d}\n" for d in domains)


def render_unbound(domains: Iterable[str]) -> str:
    return "".join(f'local-zone: "{d}" always_refuse\n' for d in domains)


def render_rpz(domains: Iterable[str], serial: Optional[int] = None) -> str:
    """Response policy zone answering NXDOMAIN for each domain and its
    subdomains. `serial` defaults to the current Unix time.
    """
    serial = int(time.time()) if serial is None else serial
    lines = [
        "$TTL 300\n",
        f"@ IN SOA localhost. hostmaster.localhost. {serial} 3600 600 604800 300\n",
        "@ IN NS localhost.\n",
    ]
    for d in domains:
        lines.append(f"{d} CNAME .\n")
        lines.append(f"*.{d} CNAME .\n")
    return "".join(lines)


_RENDERERS = {
    "plain": render_plain,
    "unbound": render_unbound,
    "rpz": render_rpz,
}


def render(domains: Iterable[str], fmt: str = "plain") -> str:
    """ex) render(["example.com"], "unbound") -> 'local-zone: "example.com" always_refuse\\n'
    """
    return _RENDERERS[get_format(fmt).name](domains)
