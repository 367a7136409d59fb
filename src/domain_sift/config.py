from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Limits:
    # RFC 1035 caps a single label at 63 octets.
    max_label_len: int = 63
    # 255 octets on the wire leaves 253 printable characters without the
    # trailing root dot.
    max_domain_len: int = 253
    # The IANA list has held well over 1,400 entries since the new gTLD
    # rounds; anything smaller means a truncated or corrupted file.
    min_tld_count: int = 1400


@dataclass(frozen=True, slots=True)
class OutputFormat:
    name: str
    # Whether the target resolver blocks "*.domain" for each entry. When it
    # does, subdomains of listed domains are redundant and get reduced away.
    wildcard: bool = False


LIMITS = Limits()

FORMATS = {
    # one domain per line
    "plain": OutputFormat(name="plain"),
    # unbound.conf local-zone include
    "unbound": OutputFormat(name="unbound"),
    # BIND-style response policy zone records
    "rpz": OutputFormat(name="rpz", wildcard=True),
}
