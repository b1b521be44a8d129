"""
Command-Line Interface for compoundcalc.

Purpose
-------
Runs projections, reverse solves and scenario comparisons from the shell,
and manages the persisted last-projection record.

Commands
--------
- project: Project an account forward and summarize it
- solve: Reverse solve for the required rate or principal
- compare: Compare scenarios from a comparison file
- config: Validate or scaffold input files
- state: Show or reset the persisted last projection
- info: Show version and dependency information

Example Usage
-------------
    # Daily compounding for 30 days with a target
    $ compoundcalc project -p 1000 -r 5 -d 30 --period 1 --target 1200

    # Required rate to double in a year of monthly periods
    $ compoundcalc solve rate -p 1000 -t 2000 -d 365 --period 30

    # Compare scenarios
    $ compoundcalc compare -c scenarios.json

    # Show version
    $ compoundcalc --version
"""

from __future__ import annotations

import json
import sys
import warnings
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import AppSettings
from .constants import CHART_KINDS, CURRENCY_SYMBOLS, NOT_REACHED, PERIOD_OPTIONS
from .exceptions import CompoundCalcError
from .logging_config import setup_logging
from .utils import format_currency


def _get_console():
    """Rich console, imported lazily for startup time."""
    from rich.console import Console
    return Console()


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _echo_warnings(caught) -> None:
    for w in caught:
        click.echo(f"Warning: {w.message}", err=True)


def _format_day(day: Optional[int]) -> str:
    return NOT_REACHED if day is None else f"day {day}"


@click.group()
@click.version_option(version=__version__, prog_name="compoundcalc")
@click.option("--quiet", "-q", is_flag=True, help="Plain output, no tables")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-json", is_flag=True, help="Emit log records as JSON lines")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool, log_json: bool) -> None:
    """
    compoundcalc - Compound Interest Projection Engine.

    Project savings forward period by period, find when a target is
    reached, solve for the rate or principal a target needs, and compare
    scenarios side by side.

    Use 'compoundcalc COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.effective_log_level, json_format=log_json)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = None if quiet else _get_console()


# ---------------------------------------------------------------------------
# project
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Parameters file (JSON). Command-line options override its values."
)
@click.option("--principal", "-p", type=str, default=None, help="Initial capital")
@click.option("--rate", "-r", type=str, default=None, help="Rate in percent per period")
@click.option("--days", "-d", type=str, default=None, help="Horizon length in days")
@click.option(
    "--period",
    type=str,
    default=None,
    help=f"Period length in days or one of {', '.join(PERIOD_OPTIONS)}"
)
@click.option("--contribution", type=str, default=None, help="Contribution per period")
@click.option("--target", "-t", type=str, default=None, help="Target amount")
@click.option("--inflation", type=str, default=None, help="Annual inflation in percent")
@click.option(
    "--annualized", is_flag=True,
    help="Treat the rate as annual and convert it to each period's equivalent"
)
@click.option(
    "--currency",
    type=click.Choice(sorted(CURRENCY_SYMBOLS)),
    default=None,
    help="Display currency label (no conversion)"
)
@click.option("--table", "show_table", is_flag=True, help="Show every projection row")
@click.option("--csv", "csv_path", type=click.Path(path_type=Path), default=None,
              help="Export rows to this CSV file")
@click.option("--plot", "plot_path", type=click.Path(path_type=Path), default=None,
              help="Save a chart to this image file")
@click.option("--chart", type=click.Choice(list(CHART_KINDS)), default="area",
              help="Chart style for --plot")
@click.option("--save", is_flag=True, help="Persist parameters and summary to the state file")
@click.pass_context
def project(
    ctx: click.Context,
    config: Optional[Path],
    principal: Optional[str],
    rate: Optional[str],
    days: Optional[str],
    period: Optional[str],
    contribution: Optional[str],
    target: Optional[str],
    inflation: Optional[str],
    annualized: bool,
    currency: Optional[str],
    show_table: bool,
    csv_path: Optional[Path],
    plot_path: Optional[Path],
    chart: str,
    save: bool,
) -> None:
    """
    Project an account forward and summarize it.

    Example:
        compoundcalc project -p 1000 -r 5 -d 30 --period Daily --target 1200
    """
    console = ctx.obj.get("console")
    settings: AppSettings = ctx.obj["settings"]
    currency = currency or settings.currency

    from .projection import Parameters, project as run_projection
    from .serialization import export_csv, load_parameters_file, save_state
    from .summary import summarize

    inputs = {}
    if config is not None:
        try:
            inputs = load_parameters_file(config).model_dump()
        except CompoundCalcError as e:
            _fail(str(e))

    overrides = {
        "principal": principal,
        "annual_rate_percent": rate,
        "total_days": days,
        "period_days": PERIOD_OPTIONS.get(period, period) if period else None,
        "contribution_per_period": contribution,
        "target_amount": target,
        "inflation_rate_percent": inflation,
    }
    inputs.update({k: v for k, v in overrides.items() if v is not None})
    if annualized:
        inputs["rate_mode"] = "annualized"

    try:
        params = Parameters.from_inputs(**inputs)
        projection = run_projection(params)
        summary = summarize(params, projection)
    except CompoundCalcError as e:
        _fail(str(e))

    rows = [
        ("Periods", f"{projection.steps:,} x {params.period_days} day(s)"),
        ("Final Amount", format_currency(summary.final_amount, currency)),
        ("Interest Earned", format_currency(summary.interest_earned, currency)),
        ("Total Contributed", format_currency(summary.total_contributed, currency)),
        ("Max / Min", f"{format_currency(summary.max_amount, currency)} / "
                      f"{format_currency(summary.min_amount, currency)}"),
        ("Average", format_currency(summary.average_amount, currency)),
        ("Inflation Adjusted", format_currency(summary.inflation_adjusted_amount, currency)),
        ("Doubling Time (Rule of 72)",
         "n/a" if summary.doubling_days is None else f"{summary.doubling_days:,} days"),
    ]
    if params.target_amount is not None:
        rows.append(("Target Hit", _format_day(summary.target_hit_day)))

    if console:
        from rich.table import Table

        table = Table(title="Projection Summary", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")
        for label, value in rows:
            table.add_row(label, value)
        console.print(table)

        if show_table:
            detail = Table(title="Projection", show_header=True)
            detail.add_column("Period", justify="right")
            detail.add_column("Day", justify="right")
            detail.add_column("Amount", justify="right")
            for point in projection:
                detail.add_row(str(point.period_index), str(point.day_offset),
                               format_currency(point.amount, currency))
            console.print(detail)
    else:
        for label, value in rows:
            click.echo(f"{label}: {value}")
        if show_table:
            click.echo("Period,Day,Amount")
            for point in projection:
                click.echo(f"{point.period_index},{point.day_offset},{point.amount}")

    if csv_path:
        export_csv(projection, csv_path)
        click.echo(f"CSV saved to {csv_path}")

    if plot_path:
        import matplotlib
        matplotlib.use("Agg")
        from .plotting import plot_projection

        plot_projection(projection, kind=chart, target=params.target_amount,
                        currency=currency, save_path=str(plot_path))
        click.echo(f"Chart saved to {plot_path}")

    if save:
        save_state(settings.state_file, params, summary, currency=currency)
        click.echo(f"State saved to {settings.state_file}")


# ---------------------------------------------------------------------------
# solve
# ---------------------------------------------------------------------------

@main.group()
def solve() -> None:
    """
    Reverse solve for a required rate or principal.

    Periodic contributions are not part of the inverse; the answer assumes
    growth from the principal alone.
    """
    pass


_solve_options = [
    click.option("--target", "-t", type=str, required=True, help="Target amount"),
    click.option("--days", "-d", type=str, required=True, help="Horizon length in days"),
    click.option("--period", type=str, required=True,
                 help=f"Period length in days or one of {', '.join(PERIOD_OPTIONS)}"),
    click.option("--contribution", type=str, default=None,
                 help="Ignored by the inverse (a warning is shown)"),
    click.option("--annualized", is_flag=True, help="Express the rate as an annual rate"),
]


def _with_solve_options(func):
    for option in reversed(_solve_options):
        func = option(func)
    return func


def _run_reverse_solve(**kwargs):
    from .solver import reverse_solve

    period = kwargs.pop("period")
    kwargs["period_days"] = PERIOD_OPTIONS.get(period, period)
    kwargs["rate_mode"] = "annualized" if kwargs.pop("annualized") else "per_period"
    if kwargs.get("contribution_per_period") is None:
        kwargs["contribution_per_period"] = 0.0

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            solution = reverse_solve(**kwargs)
        except CompoundCalcError as e:
            _fail(str(e))
    _echo_warnings(caught)
    return solution


@solve.command("rate")
@click.option("--principal", "-p", type=str, required=True, help="Initial capital")
@_with_solve_options
@click.pass_context
def solve_rate_cmd(ctx, principal, target, days, period, contribution, annualized) -> None:
    """
    Rate (percent) needed to grow PRINCIPAL into TARGET.

    Example:
        compoundcalc solve rate -p 1000 -t 2000 -d 365 --period Monthly
    """
    solution = _run_reverse_solve(
        principal=principal,
        target_amount=target,
        total_days=days,
        period=period,
        contribution_per_period=contribution,
        annualized=annualized,
    )
    unit = "per year" if annualized else "per period"
    click.echo(f"Required rate: {solution.value:.4f}% {unit}")


@solve.command("principal")
@click.option("--rate", "-r", type=str, required=True, help="Rate in percent")
@_with_solve_options
@click.pass_context
def solve_principal_cmd(ctx, rate, target, days, period, contribution, annualized) -> None:
    """
    Principal needed to reach TARGET at RATE.

    Example:
        compoundcalc solve principal -r 5 -t 2000 -d 30 --period Daily
    """
    settings: AppSettings = ctx.obj["settings"]
    solution = _run_reverse_solve(
        annual_rate_percent=rate,
        target_amount=target,
        total_days=days,
        period=period,
        contribution_per_period=contribution,
        annualized=annualized,
    )
    click.echo(f"Required principal: {format_currency(solution.value, settings.currency)}")


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Comparison file (JSON) with period_days, target_amount and scenarios"
)
@click.option(
    "--currency",
    type=click.Choice(sorted(CURRENCY_SYMBOLS)),
    default=None,
    help="Display currency label (no conversion)"
)
@click.option("--plot", "plot_path", type=click.Path(path_type=Path), default=None,
              help="Save an overlay chart to this image file")
@click.pass_context
def compare(ctx: click.Context, config: Path, currency: Optional[str],
            plot_path: Optional[Path]) -> None:
    """
    Compare scenarios under a shared compounding period.

    Results are listed in file order; no ranking is applied.

    Example:
        compoundcalc compare -c scenarios.json
    """
    console = ctx.obj.get("console")
    settings: AppSettings = ctx.obj["settings"]
    currency = currency or settings.currency

    from .comparison import compare as run_compare
    from .serialization import load_comparison_file

    try:
        cfg = load_comparison_file(config)
        scenarios = cfg.to_scenarios()
        results = run_compare(
            scenarios,
            cfg.period_days,
            cfg.target_amount,
            inflation_rate_percent=cfg.inflation_rate_percent,
            rate_mode=cfg.rate_mode,
        )
    except CompoundCalcError as e:
        _fail(str(e))

    if console:
        from rich.table import Table

        table = Table(title=f"Scenario Comparison ({cfg.period_days}-day periods)")
        table.add_column("Scenario", style="cyan")
        table.add_column("Rate %", justify="right")
        table.add_column("Final", style="green", justify="right")
        table.add_column("Interest", justify="right")
        table.add_column("Target Hit", justify="right")
        for scenario, summary in results:
            table.add_row(
                scenario.name,
                f"{scenario.annual_rate_percent:g}",
                format_currency(summary.final_amount, currency),
                format_currency(summary.interest_earned, currency),
                _format_day(summary.target_hit_day) if cfg.target_amount else "-",
            )
        console.print(table)
    else:
        for scenario, summary in results:
            click.echo(
                f"{scenario.name}: final={summary.final_amount:.2f} "
                f"interest={summary.interest_earned:.2f} "
                f"target={summary.target_status}"
            )

    if plot_path:
        import matplotlib
        matplotlib.use("Agg")
        from .plotting import plot_comparison

        plot_comparison(scenarios, cfg.period_days, target=cfg.target_amount,
                        rate_mode=cfg.rate_mode, currency=currency,
                        save_path=str(plot_path))
        click.echo(f"Chart saved to {plot_path}")


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

@main.group()
def config() -> None:
    """
    Configuration file commands.

    Validate or scaffold parameters and comparison files.
    """
    pass


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, config_file: Path) -> None:
    """
    Validate a parameters or comparison file.

    Files with a "scenarios" key are checked as comparison files.

    Example:
        compoundcalc config validate params.json
    """
    from .serialization import load_comparison_file, load_parameters_file

    try:
        with open(config_file, "r") as f:
            raw = json.load(f)
        if isinstance(raw, dict) and "scenarios" in raw:
            cfg = load_comparison_file(config_file)
            cfg.to_scenarios()
            click.echo("Comparison file is valid")
            click.echo(f"Scenarios: {len(cfg.scenarios)}")
        else:
            cfg = load_parameters_file(config_file)
            cfg.to_parameters()
            click.echo("Parameters file is valid")
    except (CompoundCalcError, json.JSONDecodeError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)


@config.command("create")
@click.argument("output_file", type=click.Path(path_type=Path))
@click.option("--template", "-t", type=click.Choice(["projection", "comparison"]),
              default="projection")
@click.pass_context
def config_create(ctx: click.Context, output_file: Path, template: str) -> None:
    """
    Create a starter file from a template.

    Example:
        compoundcalc config create params.json --template projection
    """
    from .config import ComparisonConfig, ParametersConfig, ScenarioConfig

    if template == "projection":
        config_data = ParametersConfig(target_amount=1200).model_dump()
    else:
        config_data = ComparisonConfig(
            period_days=PERIOD_OPTIONS["Monthly"],
            target_amount=1500,
            scenarios=[
                ScenarioConfig(name="Cautious", principal=1000,
                               annual_rate_percent=1, total_days=730, color="#82ca9d"),
                ScenarioConfig(name="Balanced", principal=1000,
                               annual_rate_percent=2, total_days=730, color="#8884d8"),
                ScenarioConfig(name="Bold", principal=1000,
                               annual_rate_percent=3, total_days=730, color="#ff7f50"),
            ],
        ).model_dump()

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as f:
        json.dump(config_data, f, indent=2)

    if not ctx.obj.get("quiet", False):
        click.echo(f"Created configuration file: {output_file}")


# ---------------------------------------------------------------------------
# state
# ---------------------------------------------------------------------------

@main.group()
def state() -> None:
    """Show or reset the persisted last projection."""
    pass


@state.command("show")
@click.pass_context
def state_show(ctx: click.Context) -> None:
    """Print the persisted record as JSON."""
    settings: AppSettings = ctx.obj["settings"]
    from .serialization import load_state

    if not settings.state_file.exists():
        click.echo("No saved projection")
        return
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            _, record = load_state(settings.state_file)
    except CompoundCalcError as e:
        _fail(str(e))
    _echo_warnings(caught)
    click.echo(json.dumps(record, indent=2))


@state.command("reset")
@click.pass_context
def state_reset(ctx: click.Context) -> None:
    """Delete the persisted record."""
    settings: AppSettings = ctx.obj["settings"]
    from .serialization import reset_state

    if reset_state(settings.state_file):
        click.echo("Saved projection removed")
    else:
        click.echo("No saved projection")


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers of the installed dependencies.
    """
    console = ctx.obj.get("console")

    info_lines = [
        f"compoundcalc Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]

    for name in ("numpy", "pandas", "pydantic", "matplotlib", "rich", "click"):
        try:
            mod = __import__(name)
            version = getattr(mod, "__version__", "installed")
            info_lines.append(f"{name}: {version}")
        except ImportError:
            info_lines.append(f"{name}: not installed")

    if console:
        from rich.panel import Panel
        console.print(Panel("\n".join(info_lines), title="System Information"))
    else:
        for line in info_lines:
            click.echo(line)


if __name__ == "__main__":
    main()
