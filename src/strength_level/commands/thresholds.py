"""Threshold table commands."""

import click

from ..models.strength import Sex
from .base import echo_info, echo_success, format_table, load_table_or_exit, thresholds_option


@click.group()
def thresholds():
    """Inspect strength threshold tables."""
    pass


@thresholds.command("show")
@click.option("--sex", type=click.Choice([s.value for s in Sex]), default=None, help="Only show one sex")
@thresholds_option
@click.pass_context
def show(ctx: click.Context, sex: str | None, thresholds_source: str | None):
    """Show tiers and ratios for each exercise."""
    table = load_table_or_exit(ctx, thresholds_source)

    rows = []
    for exercise, by_sex in table.levels.items():
        for s, pairs in by_sex.items():
            if sex and s.value != sex:
                continue
            for tier, ratio in pairs:
                rows.append([exercise, s.value, tier, f"{ratio:.2f}"])

    click.echo(format_table(["Exercise", "Sex", "Tier", "Ratio"], rows))


@thresholds.command("validate")
@thresholds_option
@click.pass_context
def validate(ctx: click.Context, thresholds_source: str | None):
    """Check that a threshold table loads cleanly."""
    table = load_table_or_exit(ctx, thresholds_source)

    echo_info(f"Source: {table.source}")
    echo_success(f"Thresholds valid ({len(table.exercises)} exercises: {', '.join(table.exercises)})")
