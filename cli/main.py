"""linkcheck CLI — entry-point for probing URLs and listing page links.

Usage:
    python cli/main.py --help

Commands:
    probe  → bounded-time reachability check for one URL
    links  → print every anchor href found on a page
    check  → one crawl step: fetch a page and probe all of its links
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from linkcheck.checker import FetchError, Prober, check_page, fetch_and_extract

app = typer.Typer(
    name="linkcheck",
    help="Check links and list the hyperlinks of web pages.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Probe
# ---------------------------------------------------------------------------
@app.command("probe")
def probe_cmd(
    domain: str = typer.Option(..., help="Base domain or URL, e.g. example.com."),
    path: str = typer.Option("/", help="Path or URL to resolve against the domain."),
    timeout: Optional[float] = typer.Option(None, help="Deadline in seconds."),
) -> None:
    """Probe a single URL and print its outcome."""
    outcome = Prober(timeout=timeout).probe(domain, path)
    typer.echo(str(outcome))
    if not outcome.ok:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------
@app.command("links")
def links_cmd(
    url: str = typer.Option(..., help="Page to fetch."),
) -> None:
    """Fetch a page and print every anchor href, one per line."""
    try:
        links = fetch_and_extract(url)
    except FetchError as exc:
        typer.echo(f"[links] {exc}", err=True)
        raise typer.Exit(1)

    for link in links:
        typer.echo(link)


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------
@app.command("check")
def check_cmd(
    url: str = typer.Option(..., help="Page whose links should be probed."),
    timeout: Optional[float] = typer.Option(None, help="Per-link deadline in seconds."),
    broken_only: bool = typer.Option(False, "--broken-only", help="Only print failing links."),
) -> None:
    """Fetch a page, probe each of its links and print the outcomes."""
    typer.echo(f"[check] Fetching {url!r} …")
    try:
        results = check_page(url, prober=Prober(timeout=timeout))
    except FetchError as exc:
        typer.echo(f"[check] {exc}", err=True)
        raise typer.Exit(1)

    broken = 0
    for _href, outcome in results:
        if not outcome.ok:
            broken += 1
        elif broken_only:
            continue
        typer.echo(str(outcome))

    typer.echo(f"[check] {len(results)} link(s) checked, {broken} broken.")
    if broken:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
