"""CLI interface for chainlinked."""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .carousel import (
    analyze_template,
    build_carousel_system_prompt,
    build_carousel_user_prompt,
    build_slides_from_content,
    parse_carousel_response,
    score_content_quality,
    truncate_to_fit,
    validate_content,
)
from .config.logging import get_logger, setup_logging
from .config.settings import get_settings
from .exceptions import ChainLinkedError, TemplateLoadError
from .models import CanvasTemplate, CarouselGenerationInput, TemplateAnalysis
from .style import analyze_writing_style, build_style_prompt_fragment

app = typer.Typer(
    name="chainlinked",
    help="Analyze carousel templates, build generation prompts and fill slides.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _load_json(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        TemplateLoadError: If the file is missing or not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise TemplateLoadError(f"Cannot read {path}", str(e)) from e
    except json.JSONDecodeError as e:
        raise TemplateLoadError(f"{path} is not valid JSON", str(e)) from e


def _load_template(path: Path) -> CanvasTemplate:
    try:
        return CanvasTemplate.model_validate(_load_json(path))
    except ValidationError as e:
        raise TemplateLoadError(f"{path} is not a valid carousel template", str(e)) from e


def _fail(error: ChainLinkedError) -> None:
    logger.debug(f"Command failed: {error}")
    err_console.print(f"[red]Error:[/red] {error.message}", soft_wrap=True)
    if error.details:
        err_console.print(error.details, style="dim", markup=False, soft_wrap=True)
    raise typer.Exit(1)


def _slot_table(analysis: TemplateAnalysis) -> Table:
    table = Table(
        title=f"{analysis.template_name} ({analysis.total_slides} slides)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Slot", style="cyan")
    table.add_column("Slide")
    table.add_column("Type")
    table.add_column("Max", justify="right")
    table.add_column("Required")
    for slot in analysis.slots:
        table.add_row(
            slot.id,
            str(slot.slide_index + 1),
            slot.type.value,
            str(slot.max_length),
            "[green]yes[/green]" if slot.required else "[dim]no[/dim]",
        )
    return table


@app.command("analyze-template")
def analyze_template_command(
    template_path: Path = typer.Argument(..., help="Canvas template JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Detect slide purposes and fillable slots in a template."""
    try:
        template = _load_template(template_path)
    except TemplateLoadError as e:
        _fail(e)
    analysis = analyze_template(template)
    if as_json:
        typer.echo(json.dumps(analysis.model_dump(mode="json", by_alias=True), indent=2))
        return
    console.print(_slot_table(analysis))
    console.print(
        f"[bold]{analysis.total_slots}[/bold] slots, "
        f"[bold]{analysis.required_slots}[/bold] required"
    )


@app.command("analyze-style")
def analyze_style_command(
    posts_path: Path = typer.Argument(..., help='JSON file with "ownPosts" and "savedPosts"'),
    fragment: bool = typer.Option(
        False, "--fragment", help="Print the prompt fragment instead of the profile"
    ),
) -> None:
    """Build a writing style profile from post texts."""
    try:
        data = _load_json(posts_path)
        if not isinstance(data, dict):
            raise TemplateLoadError(f"{posts_path} must hold a JSON object")
    except TemplateLoadError as e:
        _fail(e)
    own_posts = [p for p in data.get("ownPosts") or [] if isinstance(p, str)]
    saved_posts = [p for p in data.get("savedPosts") or [] if isinstance(p, str)]
    profile = analyze_writing_style(own_posts, saved_posts)
    if fragment:
        typer.echo(build_style_prompt_fragment(profile))
        return
    typer.echo(json.dumps(profile.model_dump(mode="json", by_alias=True), indent=2))


@app.command("build-prompts")
def build_prompts_command(
    template_path: Path = typer.Argument(..., help="Canvas template JSON file"),
    topic: str = typer.Option(..., "--topic", "-t", help="Carousel topic"),
    tone: str = typer.Option("professional", "--tone", help="Tone of the carousel"),
    cta: Optional[str] = typer.Option(None, "--cta", help="Call-to-action type"),
    custom_cta: Optional[str] = typer.Option(None, "--custom-cta", help="Text for --cta custom"),
    key_points: Optional[list[str]] = typer.Option(
        None, "--key-point", "-k", help="Key point to cover (repeatable)"
    ),
    audience: Optional[str] = typer.Option(None, "--audience", help="Target audience"),
) -> None:
    """Print the system and user prompts for a template and topic."""
    if not topic.strip():
        err_console.print("[red]Invalid topic:[/red] Topic cannot be empty")
        raise typer.Exit(1)
    try:
        template = _load_template(template_path)
    except TemplateLoadError as e:
        _fail(e)
    data = CarouselGenerationInput(
        topic=topic.strip(),
        audience=audience,
        key_points=key_points or [],
        tone=tone,
        cta_type=cta,
        custom_cta=custom_cta,
        template_analysis=analyze_template(template),
    )
    console.print(Panel("System prompt", style="bold cyan"))
    console.print(build_carousel_system_prompt(data), markup=False, highlight=False, soft_wrap=True)
    console.print(Panel("User prompt", style="bold cyan"))
    console.print(build_carousel_user_prompt(data), markup=False, highlight=False, soft_wrap=True)


@app.command("build")
def build_command(
    template_path: Path = typer.Argument(..., help="Canvas template JSON file"),
    content_path: Path = typer.Argument(..., help="Raw model response with slot content"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write built slides here instead of stdout"
    ),
) -> None:
    """Fill a template with a model response and print the built slides."""
    try:
        template = _load_template(template_path)
        try:
            raw = content_path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateLoadError(f"Cannot read {content_path}", str(e)) from e
    except TemplateLoadError as e:
        _fail(e)

    analysis = analyze_template(template)
    content = parse_carousel_response(raw, analysis.slots)
    if content is None:
        err_console.print("[red]Error:[/red] No JSON object found in the content file")
        raise typer.Exit(1)

    validation = validate_content(content, analysis.slots)
    for issue in validation.issues:
        err_console.print(f"[yellow]Warning:[/yellow] {issue}")
    fitted = {}
    for slot in analysis.slots:
        text = content.get(slot.id)
        if text:
            fitted[slot.id] = truncate_to_fit(text, slot.max_length)

    result = build_slides_from_content(template, analysis, fitted)
    for warning in result.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {warning}")
    quality = score_content_quality(analysis, fitted)

    slides_json = json.dumps(result.slides_to_wire(), indent=2)
    if output is not None:
        output.write_text(slides_json, encoding="utf-8")
        err_console.print(f"[green]Wrote {len(result.slides)} slides to[/green] {output}")
    else:
        typer.echo(slides_json)
    err_console.print(
        f"Filled [bold]{result.filled_slots}/{result.total_slots}[/bold] slots, "
        f"quality [bold]{quality.overall}[/bold]/100",
        highlight=False,
    )


def main() -> None:
    """Entry point for the CLI."""
    try:
        log_level = get_settings().log_level
    except ChainLinkedError:
        # Fall back when the environment holds invalid settings
        log_level = "INFO"
    setup_logging(level=log_level)
    app()


if __name__ == "__main__":
    main()
