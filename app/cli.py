"""
lifefit — command-line tools
============================

  lifefit-fit       Estimate the survival function of a batch of events read
                    from stdin (or a file) and fit Weibull and Exponential
                    distributions to it.
  lifefit-plotexp   Tabulate the density and CDF of an Exponential distribution.
  lifefit-plotweib  Tabulate the density and CDF of a Weibull distribution.

Event records are "time,kind" lines, kind being "ttf" or "t+".
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from core.config import AnalysisConfig, GridConfig
from data_prep.loader import open_events
from data_prep.validators import validate_events
from distributions.base import LifetimeDistribution
from distributions.exponential import Exponential
from distributions.weibull import Weibull
from estimators.methods import EstimationMethod, estimate
from fitting import fit_all
from report.tables import distribution_table, format_fit_lines, points_table, render_table

logger = logging.getLogger("lifefit")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="lifefit: %(message)s",
        stream=sys.stderr,
    )


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity",
    )


def run_fit(config: AnalysisConfig, stdin: TextIO, stdout: TextIO, path: Optional[str] = None) -> None:
    """Estimate, fit and print; raises ValueError on bad input."""
    method = EstimationMethod.parse(config.method)
    events = open_events(stdin, path=path)

    validation = validate_events(events, method)
    logger.debug("%s", validation.summary())
    for w in validation.warnings:
        logger.warning(w)
    if not validation.is_valid:
        raise ValueError("; ".join(validation.errors))

    points = estimate(events, method)
    results = fit_all(points)
    for line in format_fit_lines(results):
        print(line, file=stdout)

    if config.verbose:
        table = points_table(
            points,
            weibull=results["weibull"].distribution,
            exponential=results["exponential"].distribution,
        )
        print(render_table(table, digits=config.float_digits, column_digits={"t": config.time_digits}), file=stdout)


def fit_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lifefit-fit",
        description="Fit Weibull and Exponential distributions to life data read from stdin",
    )
    parser.add_argument(
        "-m", "--method", type=str, default=AnalysisConfig.method,
        choices=[m.value for m in EstimationMethod],
        help="Empirical method used to sample the survival function",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show the samples of the survival function")
    parser.add_argument("-i", "--input", type=str, default=None, help="CSV file of events (default: stdin)")
    _add_log_level(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    config = AnalysisConfig(method=args.method, verbose=args.verbose)
    try:
        run_fit(config, sys.stdin, sys.stdout, path=args.input)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


def _grid_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--from", dest="start", type=float, default=GridConfig.start, help="Lower bound for x")
    parser.add_argument("--to", dest="stop", type=float, default=GridConfig.stop, help="Upper bound for x")
    parser.add_argument("--step", type=float, default=GridConfig.step, help="Step to advance x")
    _add_log_level(parser)
    return parser


def _print_distribution(dist: LifetimeDistribution, config: GridConfig, stdout: TextIO) -> None:
    table = distribution_table(dist, config)
    print(render_table(table, digits=config.float_digits), file=stdout)


def plotexp_main(argv: Optional[List[str]] = None) -> int:
    parser = _grid_parser("lifefit-plotexp", "Tabulate an Exponential distribution")
    parser.add_argument("--rate", type=float, default=1.0, help="Rate of the exponential distribution")
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    try:
        dist = Exponential(rate=args.rate)
        _print_distribution(dist, GridConfig(start=args.start, stop=args.stop, step=args.step), sys.stdout)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def plotweib_main(argv: Optional[List[str]] = None) -> int:
    parser = _grid_parser("lifefit-plotweib", "Tabulate a Weibull distribution")
    parser.add_argument("--shape", type=float, default=1.0, help="Shape parameter of the Weibull distribution")
    parser.add_argument("--scale", type=float, default=1.0, help="Scale parameter of the Weibull distribution")
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    try:
        dist = Weibull(shape=args.shape, scale=args.scale)
        _print_distribution(dist, GridConfig(start=args.start, stop=args.stop, step=args.step), sys.stdout)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def main() -> None:
    sys.exit(fit_main())


if __name__ == "__main__":
    main()
