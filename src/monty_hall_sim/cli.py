"""
Command-line interface for the Monty Hall Monte Carlo simulator.
"""

import click

from .config import DEFAULT_SIMULATIONS, SimulationConfig
from .errors import InvalidArgumentError
from .runner import build_runner, validate_trial_count
from .tracing import configure_logging


def _positive_count(ctx, param, value):
    try:
        return validate_trial_count(value)
    except InvalidArgumentError as err:
        raise click.BadParameter(str(err), ctx=ctx, param=param) from err


@click.command()
@click.option(
    '--simulations',
    type=int,
    default=DEFAULT_SIMULATIONS,
    callback=_positive_count,
    help=f'Number of games played per strategy (default: {DEFAULT_SIMULATIONS})'
)
@click.option(
    '--verbose',
    is_flag=True,
    default=False,
    help='Trace every game: car location, picks, opened door and board'
)
def main(simulations, verbose):
    """
    Estimate the Monty Hall win ratios of staying and of switching doors.
    """
    config = SimulationConfig(simulations=simulations, verbose=verbose)
    configure_logging(config.verbose)

    runner = build_runner(config)
    runner.simulate(config.simulations)


if __name__ == '__main__':
    main()
