"""Workspace package listing command"""

import sys

import click
from ..core.exceptions import WsmanError
from ..core.metadata import load_metadata
from ..core.list import ListDisplay, ListOptions, resolve_packages
from ..ui.console import print_error, progress_status


@click.command()
@click.option(
    "-l",
    "--long",
    is_flag=True,
    help="Show extended information (version and path)",
)
@click.option(
    "-a",
    "--all",
    "all_",
    is_flag=True,
    help="Show private crates that are normally hidden",
)
@click.option(
    "--json",
    "json_",
    is_flag=True,
    help="Show information as a JSON array",
)
@click.pass_obj
def list(obj, long: bool = False, all_: bool = False, json_: bool = False):
    """List crates in the workspace"""
    obj = obj or {}
    try:
        with progress_status("Reading workspace metadata..."):
            metadata = load_metadata(
                manifest_path=obj.get("manifest_path"),
                cargo=obj.get("cargo"),
            )
        packages = resolve_packages(metadata, include_private=all_)
        ListDisplay().render(
            packages, ListOptions(json=json_, long=long, all=all_)
        )
    except WsmanError as e:
        print_error(str(e))
        sys.exit(1)
