"""CLI interface for the tools catalog combiner."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from src.consts import DEFAULT_DATA_DIR, IGNORED_OUTPUT_FILE, TAGS_OUTPUT_FILE
from src.pipeline import run_combine_pipeline
from src.storage.permanent_storage.file_manager import FileManager

app = typer.Typer(
    name="tools",
    help="Combine the automated and manual tools lists into the website tools catalog",
)

console = Console()


def _truncate(text: str, max_len: int = 60) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


@app.command()
def combine(
    data_dir: Path = typer.Option(DEFAULT_DATA_DIR, "--data-dir", "-d", help="Directory with the tools lists"),
    automated: Path = typer.Option(None, "--automated", help="Crawled tools list (default: <data-dir>/tools-automated.json)"),
    manual: Path = typer.Option(None, "--manual", help="Manual tools list (default: <data-dir>/tools-manual.json)"),
    output: Path = typer.Option(None, "--output", "-o", help="Combined catalog file (default: <data-dir>/tools.json)"),
    tags_output: Path = typer.Option(None, "--tags-output", help="Tags file (default: <data-dir>/all-tags.json)"),
    ignore: Path = typer.Option(None, "--ignore", help="Ignore list (default: <data-dir>/tools-ignore.json)"),
    ignored_output: Path = typer.Option(None, "--ignored-output", help="Audit log of ignored tools (default: <data-dir>/tools-ignored.json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Combine tools lists and write the catalog, tags and audit log."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    console.print(f"\n[bold]Combining tools from {data_dir}...[/bold]\n")

    try:
        catalog = run_combine_pipeline(
            data_dir=data_dir,
            automated_path=automated,
            manual_path=manual,
            tools_path=output,
            tags_path=tags_output,
            ignore_path=ignore,
            ignored_output_path=ignored_output,
        )
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print("\n[bold green]Catalog generated![/bold green]")

    table = Table(title="Tools by Category")
    table.add_column("Category", style="cyan")
    table.add_column("Tools", justify="right", style="magenta")

    total = 0
    for name, category in catalog.items():
        count = len(category.tools_list)
        total += count
        table.add_row(name, str(count))

    console.print(table)
    console.print(f"Total tools: {total}\n")


@app.command()
def ignored(
    path: Path = typer.Argument(None, help=f"Audit log (default: <data-dir>/{IGNORED_OUTPUT_FILE})"),
    data_dir: Path = typer.Option(DEFAULT_DATA_DIR, "--data-dir", "-d", help="Data directory"),
) -> None:
    """Show the tools ignored during the last combine run."""
    file_manager = FileManager(data_dir)
    audit = file_manager.load_audit(path or file_manager.ignored_output_path)

    if audit is None:
        console.print("[yellow]No audit log found. Run 'combine' first.[/yellow]")
        raise typer.Exit(1)

    if not audit.ignored_tools:
        console.print(f"[green]No tools were ignored[/green] (generated {audit.generated_at.isoformat()})")
        return

    table = Table(title=f"Ignored Tools ({audit.total_ignored})")
    table.add_column("Title", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Source", style="blue")
    table.add_column("Repository", style="dim")
    table.add_column("Reason", style="dim")

    for record in audit.ignored_tools:
        table.add_row(
            record.title or "",
            record.category,
            record.source.value,
            record.repo_url or "",
            _truncate(record.reason or "", 40),
        )

    console.print(table)


@app.command()
def tags(
    path: Path = typer.Argument(None, help=f"Tags file (default: <data-dir>/{TAGS_OUTPUT_FILE})"),
    data_dir: Path = typer.Option(DEFAULT_DATA_DIR, "--data-dir", "-d", help="Data directory"),
    kind: str = typer.Option("all", "--kind", "-k", help="Tags to show (languages, technologies, all)"),
) -> None:
    """List the language and technology tags of the last combine run."""
    from src.models.model_tags import TagsFile

    if kind not in ("languages", "technologies", "all"):
        console.print(f"[red]Error:[/red] Invalid kind '{kind}'. Must be: languages, technologies, all")
        raise typer.Exit(1)

    tags_path = path or FileManager(data_dir).tags_output_path
    if not tags_path.exists():
        console.print(f"[yellow]Tags file not found: {tags_path}[/yellow]")
        raise typer.Exit(1)

    tags_file = TagsFile.model_validate_json(tags_path.read_text(encoding="utf-8"))
    groups = {"languages": tags_file.languages, "technologies": tags_file.technologies}

    for group, group_tags in groups.items():
        if kind not in (group, "all"):
            continue
        table = Table(title=f"{group.capitalize()} ({len(group_tags)})")
        table.add_column("Name", style="bold")
        table.add_column("Color", style="dim")
        table.add_column("Border", style="dim")
        for tag in group_tags:
            table.add_row(tag.name, tag.color, tag.border_color)
        console.print(table)


if __name__ == "__main__":
    app()
