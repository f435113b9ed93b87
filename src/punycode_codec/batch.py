import gzip
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .errors import PunycodeError
from .host import decode_host, encode_host

log = logging.getLogger(__name__)

DIRECTIONS = ("encode", "decode")


@dataclass(slots=True)
class ConversionStats:
    converted: int = 0
    failed: int = 0


def _open_text(path: Path):
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


def stream_hosts(path: str | Path) -> Iterable[str]:
    """Yield host names from a text file, one per line (``.gz`` is read
    transparently).

    Blank lines and lines starting with "#" are skipped:
    # IDN test domains
    пример.испытание
    xn--fsqu00a.xn--0zwm56d
    """
    with _open_text(Path(path)) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            yield line


def convert_file(
    input: str | Path,
    out: str | Path,
    direction: str = "encode",
    strict: bool = False,
) -> ConversionStats:
    """Convert every host in ``input`` and write JSONL records to ``out``.

    Example: a line "bücher.de" with direction="encode" writes
    {"host": "bücher.de", "result": "xn--bcher-kva.de"}. Hosts that fail are
    written with an "error" field instead of "result".

    ``out`` is only replaced once the whole input has been read; an
    unreadable or undecodable input leaves it untouched.
    """
    if direction not in DIRECTIONS:
        raise ValueError(
            f"Unknown direction {direction!r}, expected one of: {', '.join(DIRECTIONS)}"
        )

    input = Path(input)
    if not input.is_file():
        raise FileNotFoundError(f"Input file not found: {input}")

    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_name(out.name + ".tmp")

    stats = ConversionStats()
    try:
        with tmp.open("w", encoding="utf-8") as f:
            for host in stream_hosts(input):
                record = {"host": host}
                try:
                    if direction == "encode":
                        record["result"] = encode_host(host)
                    else:
                        record["result"] = decode_host(host, strict=strict)
                    stats.converted += 1
                except PunycodeError as e:
                    log.warning("Could not %s %r: %s", direction, host, e)
                    record["error"] = str(e)
                    stats.failed += 1
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        tmp.replace(out)
    finally:
        tmp.unlink(missing_ok=True)

    log.info(
        "%sd %d host(s) into %s, %d failed",
        direction.capitalize(),
        stats.converted,
        out,
        stats.failed,
    )
    return stats
