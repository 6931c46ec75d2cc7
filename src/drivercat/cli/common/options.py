"""Common CLI options for the CLI."""

import typer

ClasspathOpt = typer.Option(
    [],
    "--classpath",
    "-c",
    help="Directory or jar to search for driver classes. Reusable; "
    "overrides DRIVERCAT_CLASSPATH.",
    show_default=False,
)

PreferencesOpt = typer.Option(
    None,
    "--preferences",
    help="User preferences JSON file (default: DRIVERCAT_PREFERENCES or "
    "~/.config/drivercat/userpreferences.json)",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log debug output",
)

InstalledOpt = typer.Option(
    False,
    "--installed",
    help="Only show drivers that are installed and working",
)

StateOpt = typer.Option(
    "INSTALLED_WORKING",
    "--state",
    help="State to record for the driver "
    "(INSTALLED_WORKING, INSTALLED_NOT_WORKING, NOT_INSTALLED)",
)

DisplayNameOpt = typer.Option(
    None,
    "--name",
    help="Display name for the registered driver",
)

FileOpt = typer.Option(
    [],
    "--file",
    "-f",
    help="Driver archive belonging to the registration. Reusable.",
    show_default=False,
)
