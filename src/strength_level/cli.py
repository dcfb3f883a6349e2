"""CLI entry point for strength-level."""

import click

from . import __version__
from .commands import classify, serve, thresholds


@click.group()
@click.version_option(version=__version__, prog_name="strength-level")
def main():
    """strength-level: Strength Level Calculator.

    Classify squat, bench and deadlift one-rep maxes into strength tiers
    (Untrained through Freak) relative to body weight.

    Example usage:

        # Start the web form
        strength-level serve

        # Classify from the terminal
        strength-level classify -w 180 --squat 315 --bench 225 --deadlift 405

        # Inspect the standards
        strength-level thresholds show --sex F
    """
    pass


# Register commands
main.add_command(serve)
main.add_command(classify)
main.add_command(thresholds)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
