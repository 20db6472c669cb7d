"""CLI entry point that runs the destructuring demonstration."""

import typer
from rich.console import Console

from .config import CONFIG

app = typer.Typer(
    name="destructure",
    help="Destructure nested values into named bindings with defaults",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(
        CONFIG.log_level, "--log-level", "-L", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"
    ),
):
    """Configure logging before any command runs."""
    from .logging import configure_logging

    try:
        configure_logging(log_level.upper())
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def demo():
    """Print the seven destructuring examples."""
    from .demo import run_demo

    run_demo(console)


if __name__ == "__main__":
    app()
