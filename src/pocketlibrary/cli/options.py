# ABOUTME: Shared Click options for PocketLibrary CLI commands.
# ABOUTME: Provides reusable decorators for catalog, location, and preferences flags.

from pathlib import Path

import click

from pocketlibrary.config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PREFS_PATH,
    DEFAULT_RADIUS_KM,
    DEFAULT_SEARCH_ENDPOINT,
)

offline_option = click.option(
    "--offline",
    is_flag=True,
    default=False,
    help="Skip the online catalog and search sample data only.",
)

endpoint_option = click.option(
    "--endpoint",
    envvar="POCKETLIBRARY_SEARCH_ENDPOINT",
    default=DEFAULT_SEARCH_ENDPOINT,
    show_default=True,
    help="Remote search endpoint.",
)

prefs_option = click.option(
    "--prefs",
    "prefs_path",
    envvar="POCKETLIBRARY_PREFS",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Path to the preferences file (default: {DEFAULT_PREFS_PATH})",
)

lat_option = click.option(
    "--lat", type=click.FloatRange(-90.0, 90.0), default=DEFAULT_LATITUDE, show_default=True
)
lon_option = click.option(
    "--lon", type=click.FloatRange(-180.0, 180.0), default=DEFAULT_LONGITUDE, show_default=True
)
radius_option = click.option(
    "--radius",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_RADIUS_KM,
    show_default=True,
    help="Search radius in kilometers.",
)
