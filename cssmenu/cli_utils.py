from rich.console import Console
from rich.table import Table

_console = Console()


def print_icon_table(rows: list[tuple[str, str, bool]]) -> None:
    """Gibt die aufgelösten Icons als Tabelle auf der Konsole aus."""
    table = Table(title="Menü-Icons")
    table.add_column("Icon")
    table.add_column("Pfad")
    table.add_column("Status")
    for name, path, found in rows:
        status = "[green]gefunden[/green]" if found else "[red]fehlt[/red]"
        table.add_row(name, path, status)
    _console.print(table)
