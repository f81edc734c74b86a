"""CLI interface for pwstrength"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from pwstrength import __version__
from pwstrength.batch import (
    aggregate_results, build_rows, export_csv, export_json, read_passwords, score_many,
)
from pwstrength.config import load_config
from pwstrength.exceptions import ConfigError, PasswordFileError, WeakPasswordError
from pwstrength.labels import band_ranges
from pwstrength.policy import describe, validate_password_strength
from pwstrength.scoring import StrengthScorer, score_password


logger = logging.getLogger(__name__)

LOCALE_CHOICE = click.Choice(["en", "pt"])


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", type=click.Path(dir_okay=False),
              help="YAML settings file")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                                               case_sensitive=False),
              help="Logging level (overrides settings)")
@click.pass_context
def main(ctx, config_path: Optional[str], log_level: Optional[str]):
    """pwstrength - Deterministic password strength scoring

    Scores passwords 0-100 and labels them Weak, Medium, Good or Strong.
    """
    try:
        settings = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if log_level:
        settings["log_level"] = log_level.upper()

    logging.basicConfig(level=getattr(logging, settings["log_level"]))
    logger.debug(f"Settings: {settings}")
    ctx.obj = settings


@main.command()
@click.argument("password", required=False)
@click.option("--locale", type=LOCALE_CHOICE, help="Label language (default from settings)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              help="Output format (default from settings)")
@click.option("--breakdown", is_flag=True, default=False, help="Show rule-by-rule points")
@click.option("--check", is_flag=True, default=False,
              help="Fail with exit code 1 below the configured minimum score")
@click.option("--minimum", type=click.IntRange(0, 100),
              help="Minimum score for --check (implies --check)")
@click.pass_obj
def score(settings, password: Optional[str], locale: Optional[str],
          output_format: Optional[str], breakdown: bool, check: bool,
          minimum: Optional[int]):
    """Score a single password (prompts when PASSWORD is omitted)"""
    locale = locale or settings["locale"]
    output_format = output_format or settings["output_format"]

    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)

    if check or minimum is not None:
        if minimum is None:
            minimum = settings["minimum_score"]
        try:
            result = validate_password_strength(password, minimum=minimum)
        except WeakPasswordError as e:
            click.echo(f"[ERROR] {e} (score {e.score} < {e.minimum})", err=True)
            raise SystemExit(1)
    else:
        result = score_password(password)

    if output_format == "json":
        data = result.to_dict(locale)
        data["text"] = describe(result, locale)
        if not breakdown:
            data.pop("additions")
            data.pop("deductions")
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        click.echo(StrengthScorer().format_result(result, locale=locale, verbose=breakdown))


@main.command()
@click.argument("passwords_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", type=click.Path(dir_okay=False),
              help="Report path (.json or .csv)")
@click.option("--workers", type=click.IntRange(min=1), help="Thread pool size (default from settings)")
@click.option("--locale", type=LOCALE_CHOICE, help="Label language (default from settings)")
@click.option("--progress/--no-progress", default=False, help="Show a progress bar")
@click.pass_obj
def batch(settings, passwords_file: str, output: Optional[str], workers: Optional[int],
          locale: Optional[str], progress: bool):
    """Score every line of PASSWORDS_FILE"""
    locale = locale or settings["locale"]
    workers = workers or settings["max_workers"]

    try:
        passwords = read_passwords(Path(passwords_file))
    except PasswordFileError as e:
        click.echo(f"[ERROR] {e}", err=True)
        raise SystemExit(1)
    click.echo(f"Scoring {len(passwords)} passwords...")

    results = score_many(passwords, max_workers=workers, progress=progress)
    summary = aggregate_results(results)

    click.echo(f"\n[OK] Scored {summary['total']} passwords")
    click.echo(f"  Average: {summary['average_score']:.2f}  "
               f"Min: {summary['min_score']}  Max: {summary['max_score']}")
    for label, _, _ in band_ranges():
        click.echo(f"  {label.text(locale):<8} {summary['labels'][label.value]}")

    if output:
        output_path = Path(output)
        rows = build_rows(results, locale)
        if output_path.suffix.lower() == ".csv":
            export_csv(rows, output_path)
        else:
            export_json(rows, output_path, summary=summary)
        click.echo(f"\n[OK] Report saved to: {output_path}")


@main.command()
@click.option("--locale", type=LOCALE_CHOICE, help="Label language (default from settings)")
@click.pass_obj
def bands(settings, locale: Optional[str]):
    """Show the score range of each strength label"""
    locale = locale or settings["locale"]
    for label, lowest, highest in band_ranges():
        click.echo(f"{label.text(locale):<8} {lowest:>3}-{highest}")


if __name__ == "__main__":
    main()
