"""Classify lifts from the command line."""

import click

from ..models.strength import EXERCISES, Measurement, MissingThresholdsError, Sex
from ..services.classifier import classify_measurement
from .base import echo_error, echo_warning, format_table, load_table_or_exit, thresholds_option


@click.command()
@click.option(
    "--sex",
    type=click.Choice([s.value for s in Sex]),
    default=Sex.MALE.value,
    show_default=True,
    help="Sex code",
)
@click.option("--body-weight", "-w", default="", help="Body weight")
@click.option("--squat", default="", help="Squat one-rep max")
@click.option("--bench", default="", help="Bench press one-rep max")
@click.option("--deadlift", default="", help="Deadlift one-rep max")
@thresholds_option
@click.pass_context
def classify(
    ctx: click.Context,
    sex: str,
    body_weight: str,
    squat: str,
    bench: str,
    deadlift: str,
    thresholds_source: str | None,
):
    """Classify squat, bench and deadlift strength levels.

    Weights can be in any unit as long as body weight and lifts match.

    Examples:

        strength-level classify -w 180 --squat 315 --bench 225 --deadlift 405

        strength-level classify --sex F -w 140 --squat 185
    """
    table = load_table_or_exit(ctx, thresholds_source)

    lifts = dict(zip(EXERCISES, (squat, bench, deadlift)))
    measurement = Measurement(
        sex=Sex(sex),
        body_weight=body_weight,
        one_rep_max={exercise: value for exercise, value in lifts.items() if value},
    )
    if not measurement.one_rep_max:
        echo_error("Provide at least one of --squat, --bench or --deadlift.")
        ctx.exit(1)

    try:
        result = classify_measurement(table, measurement)
    except MissingThresholdsError as e:
        echo_error(str(e))
        ctx.exit(1)

    click.echo(format_table(["Exercise", "Level"], [[e, label] for e, label in result.labels.items()]))

    for field_name in result.invalid_fields:
        name = "body weight" if field_name == "body_weight" else f"{field_name} 1RM"
        echo_warning(f"Enter a valid {name}.")
