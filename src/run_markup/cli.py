"""Command-line interface for Run Markup."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from run_markup import __version__
from run_markup.config import get_settings
from run_markup.formats import SUPPORTED_EXTENSIONS
from run_markup.formats.docx_extractor import (
    PARAGRAPH_TAG,
    DocxExtractor,
    ExtractionError,
)
from run_markup.sinks.html import XHTMLSink

app = typer.Typer(
    name="run-markup",
    help="Convert Word documents to XHTML with minimal inline formatting tags.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Run Markup v{__version__}")
        raise typer.Exit()


def generate_output_path(input_path: Path, output_dir: Optional[Path] = None) -> Path:
    """Generate output path with an .html suffix."""
    output_name = f"{input_path.stem}.html"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    verbose: bool,
    fragment: bool = False,
) -> bool:
    """Convert a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if output_path is None:
        output_path = generate_output_path(input_path)

    settings = get_settings()

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        if fragment:
            console.print("[blue]Fragment:[/blue] No page wrapper")

    extractor = DocxExtractor(
        skip_empty_paragraphs=settings.skip_empty_paragraphs,
    )

    try:
        document = extractor.load(input_path)
    except ExtractionError as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    try:
        with open(output_path, "w", encoding=settings.output_encoding) as stream:
            sink = XHTMLSink(stream, block_tags=(PARAGRAPH_TAG,))
            if not fragment:
                sink.start_document(title=input_path.stem)
            stats = extractor.extract_document(document, sink)
            if not fragment:
                sink.end_document()
            sink.close()
    except Exception as e:
        # No partial output for a failed conversion
        output_path.unlink(missing_ok=True)
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    console.print(f"[green]Success:[/green] {output_path}")
    if verbose:
        console.print(
            f"[blue]Stats:[/blue] {stats.paragraphs} paragraphs, "
            f"{stats.runs} runs, {stats.tags_opened} tags opened, "
            f"{stats.tags_closed} tags closed"
        )
    return True


def process_folder(
    folder_path: Path,
    verbose: bool,
    fragment: bool = False,
    recursive: bool = True,
) -> tuple[int, int]:
    """Convert all supported files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Word lock files (~$name.docx) are not documents
    files = sorted(f for f in files if not f.name.startswith("~$"))

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Converting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Converting {file_path.name}...")
            if process_file(file_path, None, verbose, fragment):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="File or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    fragment: Optional[bool] = typer.Option(
        None,
        "--fragment/--page",
        "-f",
        help="Write only the body markup, without the html/head/body wrapper",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Convert Word documents to XHTML.

    Examples:

        run-markup report.docx

        run-markup report.docx -o report.html --fragment

        run-markup /path/to/folder
    """
    settings = get_settings()
    use_fragment = settings.fragment if fragment is None else fragment

    if path.is_file():
        success = process_file(path, output, verbose, use_fragment)
        raise typer.Exit(0 if success else 1)
    else:
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside originals with an .html suffix."
            )

        success, fail = process_folder(path, verbose, use_fragment)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
