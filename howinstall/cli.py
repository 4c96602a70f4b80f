"""Command-line interface for how-install using Typer."""

import sys
from typing import Optional

import requests
import typer

from howinstall import __version__
from howinstall.config import HowInstallConfig
from howinstall.core import (
    LinuxDistro,
    PlatformDescriptor,
    detect_os_release,
    extract,
    is_superuser,
    resolve,
    sudo_prefix,
)
from howinstall.core.executor import CommandExecutor
from howinstall.errors import HowInstallError, NotFoundForPlatform
from howinstall.remote import PageFetcher, TldrClient
from howinstall.utils import display
from howinstall.utils.logs import setup_logging

app = typer.Typer(
    name="how-install",
    help=(
        "A CLI for helping find how to install a given command.\n\n"
        "Credit to https://tldr.sh for descriptions and "
        "https://command-not-found.com/ for command install information."
    ),
    add_completion=False,
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        display.console.print(f"how-install version {__version__}")
        raise typer.Exit()


def _confirm_install(cmd: str) -> bool:
    """Ask before installing; a non-interactive stdout declines."""
    if not sys.stdout.isatty():
        display.print_warning(f"stdout is not a terminal, not installing {cmd}")
        return False

    try:
        return display.confirm(f"Install {cmd} using the above command?", default=True)
    except (KeyboardInterrupt, EOFError):
        return False


@app.command()
def main(
    cmd: str = typer.Argument(
        ...,
        help="Command to lookup how to install"
    ),
    install: bool = typer.Option(
        False,
        "--install",
        "-i",
        help="Run install command"
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Automatically run install command without prompting"
    ),
    no_tldr: bool = typer.Option(
        False,
        "--no-tldr",
        help="Don't output TLDR info about the given command"
    ),
    distro: Optional[LinuxDistro] = typer.Option(
        None,
        "--distro",
        case_sensitive=False,
        help="OS to install for"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True
    ),
):
    """Find out how to install CMD on this system.

    Examples:
        how-install curl
        how-install ripgrep --install
        how-install jq --distro alpine --no-tldr
    """
    config = HowInstallConfig.load_from_file()
    setup_logging("DEBUG" if verbose else config.log_level)

    session = requests.Session()

    try:
        with display.print_spinner_context(f"Looking up {cmd}..."):
            page = PageFetcher(config, session=session).fetch(cmd)
    except requests.RequestException as e:
        display.print_error(f"Failed to fetch install page for {cmd}: {e}")
        raise typer.Exit(code=1)

    try:
        index = extract(page, cmd)
        if distro is not None:
            platform = PlatformDescriptor.explicit(distro)
        else:
            platform = PlatformDescriptor.detected(detect_os_release())
        command = resolve(index, platform)
    except NotFoundForPlatform as e:
        display.print_error(str(e))
        display.print_available_platforms(index.platforms)
        raise typer.Exit(code=1)
    except HowInstallError as e:
        display.print_error(str(e))
        raise typer.Exit(code=1)

    final_command = f"{sudo_prefix(is_superuser())}{command}"

    if config.show_tldr and not no_tldr:
        notes = TldrClient(config, session=session).get_page(cmd)
        if notes:
            display.print_tldr(notes)

    display.print_install_command(final_command)

    if yes or (install and _confirm_install(cmd)):
        result = CommandExecutor(shell=config.shell).execute(final_command)
        if result.error_message:
            display.print_error(result.error_message)
        raise typer.Exit(code=result.exit_code)
