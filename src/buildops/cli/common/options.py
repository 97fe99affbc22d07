"""Common CLI options for the CLI."""

import typer

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    help="Databricks CLI profile (from ~/.databrickscfg, falls back to $BUILDOPS_PROFILE)",
)

JobOpt = typer.Option(
    ...,
    "--job",
    "-j",
    help="Regex on job name",
)

EnvOpt = typer.Option(
    [],
    "--env",
    "-e",
    help="Variable for identifier expansion (KEY=VALUE). This is reusable.",
    show_default=False,
)

InheritEnvOpt = typer.Option(
    False,
    "--inherit-env",
    help="Expand identifiers with the process environment as well",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Show the resolver's debug trace",
)

NoInputOpt = typer.Option(
    False,
    "--no-input",
    help="Fail instead of prompting when several jobs match",
)
