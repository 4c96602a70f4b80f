"""Rich console display helpers for how-install.

Status output goes to stderr; only the install command itself is written
to stdout so it can be piped or captured.
"""

from typing import Iterable

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel


# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_tldr(page: str) -> None:
    """Display tldr usage notes.
    
    Args:
        page: tldr page markdown
    """
    err_console.print("[bold]TLDR[/bold]")
    err_console.print(Markdown(page))
    err_console.print()


def print_install_command(command: str) -> None:
    """Display the install section.
    
    Args:
        command: Final install command, privilege prefix included
    """
    err_console.print("[bold]INSTALL[/bold]")
    err_console.print("  ", end="")
    console.print(command, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str, title: str = "Error") -> None:
    """Display error message.
    
    Args:
        message: Error message to display
        title: Panel title
    """
    err_console.print(
        Panel(
            f"[red]{escape(message)}[/red]",
            title=f"[bold red]{title}[/bold red]",
            border_style="red"
        )
    )


def print_warning(message: str) -> None:
    """Display warning message.
    
    Args:
        message: Warning message to display
    """
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Display info message.
    
    Args:
        message: Info message to display
    """
    err_console.print(f"[blue]ℹ[/blue] {message}")


def print_available_platforms(platforms: Iterable[str]) -> None:
    """List the platforms the lookup page has instructions for."""
    names = list(platforms)
    if not names:
        print_info("The page lists no install instructions.")
        return
    print_info(f"Available platforms: {', '.join(names)}")


def confirm(message: str, default: bool = True) -> bool:
    """Prompt user for confirmation.
    
    Args:
        message: Confirmation message
        default: Default response
        
    Returns:
        True if user confirms, False otherwise
    """
    from rich.prompt import Confirm
    return Confirm.ask(message, default=default, console=err_console)


def print_spinner_context(message: str):
    """Create a spinner context for long-running operations.
    
    Args:
        message: Message to display with spinner
        
    Returns:
        Rich spinner context manager
    """
    return err_console.status(message, spinner="dots")
