"""CLI implementation for infoxml."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from lxml import etree

from .core.model import FetchError, ParseError, Result
from .core.util import result_asdict
from .io import open_client
from .io.base import DEFAULT_TIMEOUT
from .parsers.info import parse_info_file, parse_info_format

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Parse .info files and fetch XML documents.")


def parse_pairs(pairs: list[str], sep: str) -> dict[str, str]:
    """Split NAME<sep>VALUE options into a dict."""
    parsed = {}
    for pair in pairs:
        name, found, value = pair.partition(sep)
        if not found or not name.strip():
            raise typer.BadParameter(f"expected NAME{sep}VALUE, got {pair!r}")
        parsed[name.strip()] = value.strip()
    return parsed


def _parse_source(src: str, constants: dict[str, str]):
    if src == "-":
        return parse_info_format(sys.stdin.read(), constants)
    return parse_info_file(src, constants)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output to stderr"),
):
    """Parse .info files and fetch XML documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='[%(asctime)s] %(levelname)s %(name)s: %(message)s')


@app.command()
def info(
    files: list[str] = typer.Argument(..., help="Info files to parse, or '-' for stdin"),
    const: Optional[list[str]] = typer.Option(None, "-c", "--const", help="Constant as NAME=VALUE (repeatable)"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
):
    """Parse one or many info-format files into JSON."""
    constants = parse_pairs(const or [], "=")

    results: list[Result] = []
    for src in files:
        try:
            data = _parse_source(src, constants)
            res = Result(success=True, source=src, data=data, error=None)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", src, e)
            res = Result(success=False, source=src, data=None, error=str(e))
        results.append(res)

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        if len(results) == 1 and not jsonl:
            json.dump(result_asdict(results[0]), sink, indent=2)
            sink.write("\n")
        else:
            for res in results:
                sink.write(json.dumps(result_asdict(res)))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


@app.command()
def fetch(
    url: str = typer.Argument(..., help="URL of the XML document"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", min=0, help="Request timeout in seconds"),
    header: Optional[list[str]] = typer.Option(None, "-H", "--header", help="Request header as 'Name: value' (repeatable)"),
):
    """GET a URL and pretty-print the body as XML."""
    headers = parse_pairs(header or [], ":")

    with open_client(timeout=timeout) as client:
        try:
            xml = client.get(url, headers=headers)
        except (FetchError, ParseError) as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)

    typer.echo(etree.tostring(xml, pretty_print=True, encoding="unicode").rstrip("\n"))


if __name__ == "__main__":
    app()
