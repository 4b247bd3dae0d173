"""
Command-line interface for the annuity rate iteration comparison.

Prints the iteration table for both initial guesses and, optionally, the
chart payload as JSON.
"""

import json
import sys

import click

from src.core.contracts import validate_comparison_chart
from src.core.logging import configure_logging, get_logger
from src.core.math.fixed_point import (
    DEFAULT_TOLERANCE,
    MAX_ITERATIONS_DEFAULT,
    IterationConfig,
)
from src.report.session import (
    FIRST_INITIAL_VALUE_DEFAULT,
    SECOND_INITIAL_VALUE_DEFAULT,
    ComparisonSession,
)
from src.report.tables import DEFAULT_DECIMALS, render_trace_table, trace_table_title

logger = get_logger(__name__)


@click.command()
@click.version_option(version="0.1.0", prog_name="rate-iteration")
@click.option(
    "--first", type=float, default=FIRST_INITIAL_VALUE_DEFAULT, show_default=True,
    help="First initial guess for the rate",
)
@click.option(
    "--second", type=float, default=SECOND_INITIAL_VALUE_DEFAULT, show_default=True,
    help="Second initial guess for the rate",
)
@click.option(
    "--tolerance", type=float, default=DEFAULT_TOLERANCE, show_default=True,
    help="Absolute stopping tolerance |x_k - x_(k-1)|",
)
@click.option(
    "--max-iterations", type=int, default=MAX_ITERATIONS_DEFAULT, show_default=True,
    help="Iteration cap before reporting non-convergence",
)
@click.option(
    "--decimals", type=click.IntRange(min=0), default=DEFAULT_DECIMALS, show_default=True,
    help="Decimal places in the tables",
)
@click.option("--json", "as_json", is_flag=True, help="Also print the chart payload as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(first, second, tolerance, max_iterations, decimals, as_json, verbose):
    """
    Compare fixed-point iteration traces of the annuity rate equation
    for two initial guesses.

    Examples:
        rate-iteration
        rate-iteration --first 0.05 --second 0.30 --tolerance 1e-8
        rate-iteration --json
    """
    configure_logging(level="DEBUG" if verbose else "WARNING")
    logger.debug("Comparing initial guesses %r and %r (tolerance=%g)", first, second, tolerance)

    config = IterationConfig(tolerance=tolerance, max_iterations=max_iterations)
    try:
        session = ComparisonSession(first=first, second=second, config=config)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    failed = False
    for view in session.views():
        if view.trace is None:
            failed = True
            click.echo(f"{trace_table_title(view.initial_value)}: no result ({view.error})")
        else:
            click.echo(
                render_trace_table(
                    view.trace, title=trace_table_title(view.initial_value), decimals=decimals
                )
            )
            click.echo(f"Converged to {view.trace.final_value:.{decimals}f} "
                       f"after {view.trace.steps} iterations")
        click.echo()

    comparison = session.comparison()
    if as_json and comparison is not None:
        payload = comparison.chart_payload()
        validate_comparison_chart(payload)
        click.echo(json.dumps(payload, indent=2))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
