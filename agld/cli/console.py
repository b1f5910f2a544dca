"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

import json
from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel

from agld.domain.bead.model.value import ResolvedBead


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def json(self, data: dict[str, Any]) -> None:
        """Print raw JSON without rich markup processing."""
        self._console.print_json(json.dumps(data))

    def bead_detail(self, bead: ResolvedBead) -> None:
        """Print a resolved bead as a panel."""
        status = "[green]valid[/green]" if bead.is_valid else "[red]invalid[/red]"
        validated = "yes" if bead.validated else "no"
        lines = [
            f"[cyan]SKU:[/cyan] {bead.sku}",
            f"[cyan]Status:[/cyan] {status}    [cyan]Validated:[/cyan] {validated}",
            f"[cyan]Version:[/cyan] {bead.version}"
            + (f" (previous {bead.previous_version})" if bead.previous_version is not None else ""),
            f"[cyan]Token:[/cyan] #{bead.token_id}    [cyan]Transfers:[/cyan] {bead.transfers}",
            f"[cyan]Genesis CID:[/cyan] {bead.genesis_cid}",
            f"[cyan]Created:[/cyan] {bead.created_at}    [cyan]Updated:[/cyan] {bead.last_update}",
        ]
        self._console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{bead.bead_id}[/bold]",
                subtitle=f"[dim]{bead.network} · {bead.contract_address}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )


_console: Console | None = None


def get_console() -> Console:
    """Get the shared console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console
