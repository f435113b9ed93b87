"""
punycode encode bücher.de пример.испытание
punycode decode xn--fsqu00a.xn--0zwm56d --strict
python -m punycode_codec convert hosts.txt --out out/hosts.jsonl --direction encode
"""

import logging
from pathlib import Path
from typing import List

import typer

from .batch import convert_file
from .errors import PunycodeError
from .host import decode_host, encode_host

app = typer.Typer(help="Punycode (RFC 3492) host name conversion.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    if verbose:
        logging.basicConfig(
            format="[ %(asctime)s ] %(lineno)d %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@app.command()
def encode(hosts: List[str]) -> None:
    """Convert Unicode host names to their ACE form."""
    for host in hosts:
        try:
            print(f"{host} -> {encode_host(host)}")
        except PunycodeError as e:
            typer.echo(f"[!] {host}: {e}", err=True)
            raise typer.Exit(code=1)


@app.command()
def decode(hosts: List[str], strict: bool = False) -> None:
    """Convert ACE host names back to Unicode."""
    for host in hosts:
        try:
            print(f"{host} -> {decode_host(host, strict=strict)}")
        except PunycodeError as e:
            typer.echo(f"[!] {host}: {e}", err=True)
            raise typer.Exit(code=1)


@app.command()
def convert(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    out: Path = Path("out/hosts.jsonl"),
    direction: str = "encode",
    strict: bool = False,
) -> None:
    """Convert a file of host names (one per line) into JSONL."""
    try:
        stats = convert_file(input, out, direction=direction, strict=strict)
    except (ValueError, OSError) as e:
        typer.echo(f"[!] {e}", err=True)
        raise typer.Exit(code=2)
    print(f"Saved to {out}")
    print(f"   Converted: {stats.converted}")
    print(f"   Failed:    {stats.failed}")


if __name__ == "__main__":
    app()
