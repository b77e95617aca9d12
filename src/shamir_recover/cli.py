# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``shamir-recover FILE...``."""

from __future__ import annotations

import json

import click

from .log import configure_logging
from .policy import policy
from .reconstruct import reconstruct_many

_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def format_decimal(value: int) -> str:
    """Decimal text of ``value`` without the interpreter's int-to-str digit limit."""
    if value < 0:
        return "-" + format_decimal(-value)
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


@click.command(name="shamir-recover")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Cases processed in parallel.")
@click.option(
    "--verify/--no-verify",
    default=None,
    help="Report shares beyond the first k that disagree with the secret's polynomial.",
)
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...).")
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per case.")
def main(files: tuple[str, ...], workers: int | None, verify: bool | None, log_level: str | None, as_json: bool) -> None:
    """Reconstruct the secret of every share document in FILES."""
    configure_logging(log_level or policy.log_level)
    results = reconstruct_many(
        files,
        max_workers=workers or policy.max_workers,
        verify=policy.verify_consistency if verify is None else verify,
    )

    failed = False
    for result in results:
        if as_json:
            record = {"case": result.name, "secret": None, "error": None}
            if result.ok:
                record["secret"] = format_decimal(result.secret)
                if result.inconsistent:
                    record["inconsistent"] = [format_decimal(x) for x in result.inconsistent]
            else:
                record["error"] = str(result.error)
            click.echo(json.dumps(record))
        elif result.ok:
            click.echo(f"Secret from {result.name}: {format_decimal(result.secret)}")
            if result.inconsistent:
                xs = ", ".join(format_decimal(x) for x in result.inconsistent)
                click.echo(f"Warning in {result.name}: shares at x={xs} are inconsistent", err=True)
        else:
            click.echo(f"Error in {result.name}: {result.error}", err=True)
        failed = failed or not result.ok

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
