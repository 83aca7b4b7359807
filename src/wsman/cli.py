"""Command-line interface for Cargo workspace management"""

import click
from rich.panel import Panel

from . import __version__
from .commands import list
from .ui.console import console
from .ui.style import DEFAULT_PANEL


class WorkspaceGroup(click.Group):
    """Command group with custom help formatting"""

    def format_help(self, ctx, formatter):
        """Format help message with a styled panel"""
        console.print(
            Panel.fit(
                "\n".join(
                    [
                        "[bold blue]Workspace:[/bold blue]",
                        "  [cyan]list[/cyan]        [dim]List crates in the workspace[/dim] ([cyan]-l[/cyan]: long, [cyan]-a[/cyan]: all, [cyan]--json[/cyan]) (alias: [cyan]ls[/cyan])",
                        "",
                        "[bold blue]Global Options:[/bold blue]",
                        "  [cyan]--manifest-path[/cyan]  [dim]Path to workspace Cargo.toml[/dim]",
                        "  [cyan]--cargo[/cyan]          [dim]Cargo executable[/dim] ([cyan]env: CARGO[/cyan])",
                        "  [cyan]--version[/cyan]        [dim]Show version number[/dim] ([cyan]alias: -V[/cyan])",
                    ]
                ),
                title="wsman - Cargo workspace package listing",
                title_align=DEFAULT_PANEL.title_align,
                border_style=DEFAULT_PANEL.border_style,
                padding=DEFAULT_PANEL.padding,
            )
        )


@click.group(cls=WorkspaceGroup)
@click.option(
    "--version",
    "-V",
    is_flag=True,
    help="Show version number",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: value
    and (console.print(f"wsman {__version__}") or ctx.exit()),
)
@click.option(
    "--manifest-path",
    type=click.Path(dir_okay=False),
    help="Path to workspace Cargo.toml",
)
@click.option(
    "--cargo",
    envvar="CARGO",
    help="Cargo executable",
)
@click.pass_context
def cli(ctx, manifest_path=None, cargo=None):
    """wsman - Cargo workspace package listing"""
    ctx.obj = {"manifest_path": manifest_path, "cargo": cargo}


# Register commands
cli.add_command(list)

# Register command aliases
cli.add_command(list, name="ls")


if __name__ == "__main__":
    cli()
