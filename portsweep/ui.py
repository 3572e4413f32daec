import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn, TimeRemainingColumn
from rich.table import Table

from .models import ScanOutcome

console = Console()


def configure_logging(verbose: bool = False):
    """Routes the package loggers through rich on the shared console."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("portsweep")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


class ScannerUI:
    def __init__(self):
        self.console = console

    def display_welcome(self):
        self.console.rule("[bold red]PORTSWEEP - TCP Port Scanner[/bold red]")

    def display_start(self, host, start_port, end_port, private):
        scope = "private/local" if private else "public"
        self.console.print(Panel.fit(
            f"[bold green]Scanning {host} ports {start_port}-{end_port}[/bold green] [dim]({scope})[/dim]",
            border_style="blue",
        ))
        self.console.print("[yellow]Only scan hosts you are authorized to test.[/yellow]")

    def create_progress(self):
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=self.console
        )

    def display_results(self, outcome: ScanOutcome):
        """
        Displays open ports in a Rich table followed by summary counters.
        """
        self.console.print("\n")

        open_results = outcome.open_results
        if open_results:
            table = Table(title=f"Scan Results for {outcome.host}", show_header=True, header_style="bold magenta")
            table.add_column("Port", style="cyan", justify="right")
            table.add_column("State", style="green")
            table.add_column("Service", style="yellow")

            for res in open_results:
                table.add_row(str(res.port), res.status.value.upper(), res.service or "Unknown")

            self.console.print(table)
        else:
            self.console.print("[bold]No open ports found[/bold]")
            self.console.print("[dim]All scanned ports are closed or filtered[/dim]")

        self.console.print(f"\n[bold]Scan completed in {outcome.total_time_ms / 1000:.2f} seconds.[/bold]")
        self.console.print(f"[bold]Ports scanned: {outcome.total_ports_scanned}[/bold]")
        self.console.print(f"[bold]Open ports found: {outcome.open_ports}[/bold]")
        if outcome.closed_count > 0 or outcome.filtered_count > 0:
            self.console.print(
                f"[dim]Not shown: {outcome.closed_count} closed, {outcome.filtered_count} filtered ports[/dim]"
            )

    def show_message(self, msg, style="bold red"):
        self.console.print(f"[{style}]{msg}[/{style}]")

    def show_saved(self, filename):
        self.console.print(f"[dim]Results saved to {filename}[/dim]")
