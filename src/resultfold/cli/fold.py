"""
The `fold` command.

Parses delimited text into integer outcomes and reduces them with the
selected fold.
"""

import click
from pathlib import Path
from typing import Optional

from resultfold.cli.utils import (
    echo_success,
    echo_error,
    echo_info,
    echo_warning,
    format_values,
)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("text")
@click.option(
    "-d", "--delimiter",
    default=None,
    help="Field separator (default: ',').",
)
@click.option(
    "-m", "--mode",
    type=click.Choice(["fail-fast", "bisect"]),
    default=None,
    help="Reduction to apply (default: fail-fast).",
)
@click.option(
    "-c", "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with fold settings. Command-line options take precedence.",
)
@click.option(
    "--no-strip",
    is_flag=True,
    help="Keep whitespace around fields instead of stripping it.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="In bisect mode, exit with status 1 if any field failed.",
)
@click.option(
    "--report",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write a per-field TSV report to this file.",
)
@click.pass_context
def fold(
    ctx: click.Context,
    text: str,
    delimiter: Optional[str],
    mode: Optional[str],
    config: Optional[Path],
    no_strip: bool,
    strict: bool,
    report: Optional[Path],
) -> None:
    """
    Parse TEXT as delimited integers and fold the outcomes.

    \b
    Modes:
      fail-fast  - print all values, or stop at the first bad field
      bisect     - print good values and failures separately

    \b
    Examples:
      resultfold fold "1,2,3"
      resultfold fold "1,2,a" --mode bisect --report out/fields.tsv
      resultfold fold "4;5;6" -d ";"
      resultfold fold -- "-1,-2"
    """
    from resultfold.config import FoldConfig, FoldMode, load_config
    from resultfold.core.fold import fold_fail_fast, fold_bisect
    from resultfold.core.parse import parse_delimited
    from resultfold.report import write_report

    settings = FoldConfig()
    if config is not None:
        loaded = load_config(config)
        if loaded.is_err():
            echo_error(loaded.unwrap_err())
            raise SystemExit(1)
        settings = loaded.unwrap()

    settings = settings.override(
        delimiter=delimiter,
        mode=FoldMode(mode) if mode is not None else None,
        strip=False if no_strip else None,
        strict=True if strict else None,
    )

    if not settings.delimiter:
        echo_error("Delimiter must be a non-empty string")
        raise SystemExit(1)

    outcomes = parse_delimited(text, settings.delimiter, int, settings.strip)

    if not ctx.obj.get("quiet", False):
        echo_info(f"Parsed {len(outcomes)} fields ({settings.mode.value})")

    if report is not None:
        written = write_report(outcomes, report)
        if written.is_err():
            echo_error(written.unwrap_err())
            raise SystemExit(1)
        if not ctx.obj.get("quiet", False):
            echo_info(f"Report written to {written.unwrap()}")

    if settings.mode is FoldMode.FAIL_FAST:
        folded = fold_fail_fast(outcomes)
        if folded.is_err():
            echo_error(f"Fold failed: {folded.unwrap_err()}")
            raise SystemExit(1)
        echo_success(f"Values: {format_values(folded.unwrap())}")
        return

    oks, errs = fold_bisect(outcomes)
    echo_success(f"Values: {format_values(oks)}")
    for error in errs:
        echo_warning(f"Failed: {error}")

    if errs and settings.strict:
        echo_error(f"{len(errs)} of {len(outcomes)} fields failed")
        raise SystemExit(1)
