"""million-telemetry CLI.

Inspect and change the telemetry settings stored on this machine, and show
what CI environment (if any) the current process is running in.
"""

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from million_telemetry.ci import detect_ci
from million_telemetry.config import GlobalConfig, is_disabled_by_env
from million_telemetry.recorder import MillionTelemetry
from million_telemetry.version import __version__

app = typer.Typer(
    name="million-telemetry",
    help="Manage anonymous usage telemetry.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print machine-readable JSON",
    ),
]


def get_recorder() -> MillionTelemetry:
    """Recorder bound to the default settings store."""
    return MillionTelemetry.from_env(config=GlobalConfig())


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"million-telemetry version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Manage anonymous usage telemetry.

    Examples:
        million-telemetry status
        million-telemetry disable
    """


@app.command()
def status(as_json: JsonOption = False) -> None:
    """Show whether telemetry is enabled and why."""
    recorder = get_recorder()
    ci = detect_ci()

    disabled_reason = None
    if recorder.telemetry_disabled:
        disabled_reason = "environment variable"
    elif not recorder.identity.enabled:
        disabled_reason = f"user config ({recorder.config.path})"

    info = {
        "enabled": disabled_reason is None,
        "disabled_reason": disabled_reason,
        "config_path": str(recorder.config.path),
        "is_ci": ci.is_ci,
        "ci_name": ci.vendor_name,
        "project_id": recorder.project_info.anonymous_project_id or None,
    }

    if as_json:
        print(json.dumps(info, indent=2))
        return

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in info.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command()
def enable() -> None:
    """Enable telemetry on this machine."""
    get_recorder().set_enabled(True)
    console.print("[green]Telemetry enabled.[/]")
    if is_disabled_by_env():
        console.print(
            "[yellow]Note:[/] telemetry is still disabled by MILLION_TELEMETRY_DISABLED "
            "or DO_NOT_TRACK in this environment."
        )


@app.command()
def disable() -> None:
    """Disable telemetry on this machine."""
    get_recorder().set_enabled(False)
    console.print("[green]Telemetry disabled.[/]")


@app.command()
def reset(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
) -> None:
    """Erase the stored anonymous id and settings."""
    if not yes:
        typer.confirm("Erase stored telemetry settings?", abort=True)
    get_recorder().clear()
    console.print("[green]Telemetry settings cleared.[/]")


@app.command()
def ci(as_json: JsonOption = False) -> None:
    """Show the detected CI environment."""
    info = detect_ci()
    matched = [constant for constant, flag in info.vendor_flags.items() if flag]

    if as_json:
        data = info.model_dump(exclude={"vendor_flags"})
        data["matched_vendors"] = matched
        print(json.dumps(data, indent=2))
        return

    if not info.is_ci:
        console.print("Not running under CI.")
        return

    console.print(f"[bold]CI:[/] {info.vendor_name or 'unknown vendor'}")
    if info.is_pr is not None:
        console.print(f"[bold]Pull request:[/] {'yes' if info.is_pr else 'no'}")
    if len(matched) > 1:
        console.print(f"[dim]Matched rules: {', '.join(matched)}[/]")


if __name__ == "__main__":
    app()
