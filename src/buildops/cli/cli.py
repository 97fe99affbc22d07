"""CLI application for build resolution tooling."""

import typer

from buildops.cli.commands.builds import app as builds_app

app = typer.Typer(
    help="buildops - pick builds of Databricks jobs",
    no_args_is_help=True,
)

app.add_typer(builds_app, name="builds", help="Resolve builds by number / permalink / name.")


if __name__ == "__main__":
    app()
