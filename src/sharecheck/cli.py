"""Command line interface for sharecheck."""

from __future__ import annotations

import json
import logging
from typing import Optional

import click

from sharecheck import document
from sharecheck.consensus import Result, solve
from sharecheck.errors import ShareCheckError, ShareFormatError
from sharecheck.policy import load_policy
from sharecheck.shares import lift_int_digit_limit

_logger = logging.getLogger(__name__)


def format_result(result: Result) -> str:
    lift_int_digit_limit()
    lines = [f"Secret: {result.secret}"]
    if result.corrupt_ids:
        lines.append("Corrupt share ID(s): " + ", ".join(result.corrupt_ids))
    else:
        lines.append("No corrupt shares detected.")
    return "\n".join(lines)


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("-k", "--threshold", type=click.IntRange(min=1), help="Override the document's k")
@click.option("--workers", type=click.IntRange(min=1), help="Interpolate subsets in N processes")
@click.option("--max-subsets", type=click.IntRange(min=1), help="Refuse searches larger than this")
@click.option("--strict/--no-strict", default=None, help="Drop subsets whose secret is not integral")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with resolver policy overrides",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def main(
    source,
    threshold: Optional[int],
    workers: Optional[int],
    max_subsets: Optional[int],
    strict: Optional[bool],
    config_path: Optional[str],
    as_json: bool,
    verbose: bool,
) -> None:
    """Recover the secret from the shares in SOURCE and flag corrupt ones.

    SOURCE is a JSON share document; ``-`` (the default) reads stdin.
    """
    try:
        policy = load_policy(config_path).with_overrides(
            workers=workers, max_subsets=max_subsets, strict=strict
        )
        logging.basicConfig(
            level=logging.DEBUG if verbose else policy.logging_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        try:
            raw = source.read()
        except OSError as exc:
            raise ShareFormatError(f"Cannot read share document: {exc}") from exc
        parsed = document.loads(raw)
        k = threshold or parsed.k
        _logger.debug("Loaded %d shares, threshold %d", len(parsed.shares), k)
        result = solve(parsed.shares, k, policy=policy)
    except ShareCheckError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.as_dict(), indent=2))
    else:
        click.echo(format_result(result))


if __name__ == "__main__":
    main()
