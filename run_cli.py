import sys

import typer

import cli.cli

if __name__ == "__main__":
    # Default to a full workout when launched without arguments
    if len(sys.argv) == 1:
        sys.argv = ["run_cli.py", "run"]
    # Access app attribute - it's a Typer instance defined in cli.cli module
    typer_app: typer.Typer = cli.cli.app
    typer_app()
