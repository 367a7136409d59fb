"""
domain-sift hosts.txt blocklist.txt > blocked.txt
domain-sift --format rpz --all < list.txt > rpz.db
python -m domain_sift.sift --format unbound --output blocked.conf hosts.txt
"""

from pathlib import Path
from typing import Iterable, List, Optional

import typer

from .config import FORMATS
from .formats import get_format, render
from .match import DomainMatcher
from .reduce import reduce_domains
from .tlds import TLDTable, TLDTableError, load_tlds


def iter_lines(files: Iterable[Path]) -> Iterable[tuple[str, str]]:
    """Yield (source, line) pairs; a path of '-' reads stdin.

    Undecodable bytes are replaced rather than aborting the run.
    """
    for path in files:
        if str(path) == "-":
            stdin = typer.get_text_stream("stdin", encoding="utf-8", errors="replace")
            for line in stdin:
                yield "<stdin>", line
            continue
        with path.open(encoding="utf-8", errors="replace") as f:
            for line in f:
                yield str(path), line


def collect_domains(
    matcher: DomainMatcher,
    lines: Iterable[tuple[str, str]],
    extract_all: bool = False,
) -> tuple[dict[str, str], int]:
    """Map each extracted domain to the first source it was seen in.

    Returns (domains, number of lines read).
    """
    domains: dict[str, str] = {}
    n_lines = 0
    for source, line in lines:
        n_lines += 1
        if extract_all:
            found = matcher.extract_line_all(line)
        else:
            domain = matcher.extract_line_first(line)
            found = [domain] if domain is not None else []
        for domain in found:
            domains.setdefault(domain, source)
    return domains, n_lines


def sift(
    files: Optional[List[Path]] = typer.Argument(
        None, help="Input files; '-' or nothing reads stdin."
    ),
    fmt: str = typer.Option(
        "plain", "--format", "-f", help=f"One of: {', '.join(FORMATS)}."
    ),
    extract_all: bool = typer.Option(
        False, "--all", "-a", help="Extract every domain on a line, not just the first."
    ),
    tlds: Optional[Path] = typer.Option(
        None, "--tlds", help="Alternate TLD list (IANA tlds-alpha-by-domain.txt format)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write here instead of stdout."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract domains from blocklists, hosts files or free text and print
    them sorted and deduplicated in a resolver-ready format.
    """
    try:
        out_format = get_format(fmt)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format") from e

    try:
        table = TLDTable.from_file(tlds) if tlds is not None else load_tlds()
    except TLDTableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    matcher = DomainMatcher(table)

    try:
        domains, n_lines = collect_domains(
            matcher, iter_lines(files or [Path("-")]), extract_all=extract_all
        )
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    n_found = len(domains)
    redundant = reduce_domains(domains) if out_format.wildcard else {}

    text = render(sorted(domains), out_format.name)
    if output is not None:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e
    else:
        typer.echo(text, nl=False)

    if verbose:
        typer.echo(f"Read {n_lines:,} lines", err=True)
        typer.echo(f"   Unique domains:    {n_found:,}", err=True)
        if out_format.wildcard:
            typer.echo(f"   Covered by parent: {len(redundant):,}", err=True)
        typer.echo(f"   Written ({out_format.name}): {len(domains):,}", err=True)
        if output is not None:
            typer.echo(f"Output written to {output}", err=True)


def main() -> None:
    typer.run(sift)


if __name__ == "__main__":
    main()
