"""CLI for running the binding smoke test and demo."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from lgbm_harness.config import DemoConfig, ExtraParams, SmokeConfig
from lgbm_harness.errors import LGBMError, ParameterError
from lgbm_harness.info import get_build_info
from lgbm_harness.log import configure_logging
from lgbm_harness.params import Parameters
from lgbm_harness.smoke import run_demo, run_smoke

app = typer.Typer(
    name="lgbm-harness",
    help="Exercise the LightGBM binding layer: datasets, fields and boosters.",
    no_args_is_help=True,
)
console = Console()


def _parse_params(tokens: list[str] | None) -> ExtraParams:
    """Turn repeated ``--param key=value`` options into a mapping."""
    if not tokens:
        return {}
    try:
        return Parameters.parse(" ".join(tokens)).to_dict()  # type: ignore[return-value]
    except ParameterError as e:
        raise typer.BadParameter(str(e), param_hint="--param") from e


def _fail(error: LGBMError) -> typer.Exit:
    console.print(f"[red]{type(error).__name__}: {error}[/red]")
    return typer.Exit(1)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Configure logging for every command."""
    configure_logging(verbose=verbose)


@app.command()
def smoke(
    rows: Annotated[
        int,
        typer.Option("--rows", "-n", help="Number of synthetic rows.", min=1),
    ] = 128,
    modulus: Annotated[
        int,
        typer.Option("--modulus", "-m", help="Feature values are row index modulo this.", min=1),
    ] = 3,
    params: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-p", help="Extra LightGBM parameter as key=value (repeatable)."),
    ] = None,
) -> None:
    """Build a dataset, attach labels and create a booster."""
    config = SmokeConfig(n_rows=rows, modulus=modulus, extra_params=_parse_params(params))

    console.print("[bold]Running smoke test[/bold]")
    console.print(f"  Rows: {config.n_rows}")
    console.print(f"  Parameters: {config.to_parameters().to_string() or '(defaults)'}")
    console.print()

    try:
        result = run_smoke(config)
    except LGBMError as e:
        raise _fail(e) from None

    table = Table(title="Smoke Test", show_header=True, header_style="bold")
    table.add_column("Step", style="cyan")
    table.add_column("Result", style="green")
    table.add_row("Dataset", f"{result.n_rows} rows x {result.n_features} features")
    table.add_row("Label field", "attached" if result.label_attached else "missing")
    table.add_row("Booster", "created" if result.booster_created else "missing")
    table.add_row("Elapsed", f"{result.elapsed_s:.4f}s")
    console.print(table)
    console.print("[green]✓ Smoke test passed[/green]")


@app.command()
def demo(
    iterations: Annotated[
        int,
        typer.Option("--iterations", "-i", help="Maximum boosting iterations.", min=1),
    ] = 10,
    params: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-p", help="Override a LightGBM parameter as key=value (repeatable)."),
    ] = None,
    save_model: Annotated[
        Optional[Path],
        typer.Option("--save-model", help="Write the trained model in LightGBM text format."),
    ] = None,
) -> None:
    """Train on a tiny dataset, predict on it and show feature importance."""
    config = DemoConfig(num_iterations=iterations, extra_params=_parse_params(params))

    console.print("[bold]Training configuration[/bold]")
    console.print(f"  {config.to_parameters().to_string()}")
    console.print()

    try:
        result = run_demo(config, save_path=save_model)
    except LGBMError as e:
        raise _fail(e) from None

    if result.early_stopped:
        console.print(f"Early stopping at iteration {result.iterations - 1}")
    console.print(f"Training completed: {result.iterations} iterations in {result.train_time_s:.4f}s\n")

    table = Table(title="Predictions", show_header=True, header_style="bold")
    table.add_column("Sample", style="cyan", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Predicted", justify="right")
    for pred in result.predictions:
        table.add_row(str(pred.row + 1), f"{pred.actual:.4f}", f"{pred.predicted:.4f}")
    console.print(table)

    table = Table(title="Feature Importance (splits)", show_header=True, header_style="bold")
    table.add_column("Feature", style="cyan", justify="right")
    table.add_column("Splits", justify="right")
    for i, value in enumerate(result.feature_importance):
        table.add_row(str(i), f"{value:g}")
    console.print(table)

    if result.model_path is not None:
        console.print(f"[green]Model saved to {result.model_path}[/green]")


@app.command()
def info() -> None:
    """Show machine and LightGBM build information."""
    build = get_build_info()

    table = Table(title="LightGBM Build Information")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("CPU", build.cpu)
    table.add_row("Hardware threads", str(build.hardware_threads))
    table.add_row("Physical cores", str(build.cores))
    table.add_row("Memory", f"{build.memory_gb} GB")
    table.add_row("Architecture", build.architecture)
    table.add_row("NEON SIMD", "ENABLED" if build.neon else "Not detected")
    table.add_row("OpenMP", "ENABLED" if build.openmp else "DISABLED")
    table.add_row("OpenMP threads", str(build.openmp_threads) if build.openmp_threads is not None else "-")
    table.add_row("OS", build.os)
    table.add_row("Python", build.python)
    table.add_row("LightGBM", build.lightgbm)
    table.add_row("NumPy", build.numpy)

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
