"""Command-line interface for the Brand Voice Engine."""

from functools import wraps
import logging
from pathlib import Path
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from brand_voice_engine import __version__
from brand_voice_engine.errors import VoiceEngineError

console = Console()


def handle_errors(func):
    """Show a VoiceEngineError's user message and exit non-zero."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except VoiceEngineError as e:
            logging.getLogger(__name__).debug("Command failed: %s", e)
            console.print(f"[red]Error:[/red] {e.user_message}")
            sys.exit(1)

    return wrapper


def _config():
    from brand_voice_engine.config import VoiceEngineConfig

    return VoiceEngineConfig.from_settings()


def _load_profile(path: str):
    from brand_voice_engine.models import BrandVoiceProfile

    return BrandVoiceProfile.model_validate_json(Path(path).read_text(encoding="utf-8"))


def _save_profile(profile, path: str) -> None:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(profile.model_dump_json(indent=2), encoding="utf-8")


def _read_samples(paths: tuple[str, ...], source_type: str, split: bool) -> list:
    from brand_voice_engine.models import ContentSource
    from brand_voice_engine.style.splitter import split_into_paragraphs

    sources = []
    for path in paths:
        file_path = Path(path)
        text = file_path.read_text(encoding="utf-8")
        if split:
            for i, paragraph in enumerate(split_into_paragraphs(text), 1):
                sources.append(ContentSource(id=f"{file_path.stem}-{i}", type=source_type, content=paragraph))
        else:
            sources.append(ContentSource(id=file_path.stem, type=source_type, content=text))
    return sources


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (defaults to BVE_LOG_LEVEL or INFO)")
def main(log_level: str | None) -> None:
    """Brand Voice Engine - learn a writing voice and score content against it."""
    from brand_voice_engine.config import get_settings

    logging.basicConfig(
        level=(log_level or get_settings().log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@main.command()
@click.argument("name")
@click.argument("samples", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Write the profile JSON here")
@click.option("--owner", default="default", help="Owner id for the profile")
@click.option("--description", "-d", help="Profile description")
@click.option(
    "--type", "source_type",
    type=click.Choice(["linkedin", "twitter", "blog", "email", "other"]),
    default="other",
    help="Source type of the samples",
)
@click.option("--split", is_flag=True, help="Treat each paragraph of a file as its own sample")
@handle_errors
def train(
    name: str,
    samples: tuple[str, ...],
    output: str | None,
    owner: str,
    description: str | None,
    source_type: str,
    split: bool,
) -> None:
    """Build a voice profile from sample files.

    Example:
        bve train "Founder voice" posts/*.txt --split -o founder.json
    """
    from brand_voice_engine.profile import ProfileBuilder

    sources = _read_samples(samples, source_type, split)
    console.print(f"[bold]Training:[/bold] {name}")
    console.print(f"[dim]{len(sources)} sample(s) from {len(samples)} file(s)[/dim]\n")

    with console.status("Analyzing voice..."):
        profile = ProfileBuilder(_config()).build(name, sources, owner_id=owner, description=description)

    console.print(profile.summary(), markup=False)
    if output:
        _save_profile(profile, output)
        console.print(f"\n[green]OK[/green] Profile saved to {output}")


@main.command()
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("samples", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Output path (defaults to overwriting the profile)")
@click.option("--split", is_flag=True, help="Treat each paragraph of a file as its own sample")
@handle_errors
def retrain(profile_path: str, samples: tuple[str, ...], output: str | None, split: bool) -> None:
    """Add samples to a profile and re-extract its voice."""
    from brand_voice_engine.profile import ProfileBuilder

    profile = _load_profile(profile_path)
    sources = _read_samples(samples, "other", split)
    with console.status("Re-analyzing voice..."):
        updated = ProfileBuilder(_config()).retrain(profile, sources)

    console.print(updated.summary(), markup=False)
    _save_profile(updated, output or profile_path)
    console.print(f"\n[green]OK[/green] Profile saved to {output or profile_path}")


@main.command()
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@handle_errors
def show(profile_path: str) -> None:
    """Show a saved profile."""
    console.print(_load_profile(profile_path).summary(), markup=False)


@main.command()
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("text_path", type=click.Path(exists=True, dir_okay=False))
@handle_errors
def score(profile_path: str, text_path: str) -> None:
    """Score a text file against a saved profile."""
    from brand_voice_engine.scoring import AlignmentScorer

    profile = _load_profile(profile_path)
    text = Path(text_path).read_text(encoding="utf-8")
    comparison = AlignmentScorer(_config()).score(text, profile)

    table = Table(title=f"Alignment with {profile.name}")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", style="green", justify="right")

    alignment = comparison.alignment
    table.add_row("Tone", f"{alignment.tone:.2f}")
    table.add_row("Vocabulary", f"{alignment.vocabulary:.2f}")
    table.add_row("Structure", f"{alignment.structure:.2f}")
    table.add_row("Overall", f"{alignment.overall:.2f}")
    console.print(table)

    if comparison.differences:
        console.print("\n[bold]Differences:[/bold]")
        for difference in comparison.differences:
            console.print(f"  - {difference}")
        console.print("\n[bold]Improvements:[/bold]")
        for improvement in comparison.improvements:
            console.print(f"  - {improvement}")


@main.command()
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--rating", "-r", type=click.IntRange(1, 5), required=True, help="Rating from 1 to 5")
@click.option("--content-id", default="cli", help="Id of the generated content being rated")
@click.option("--comment", "-c", default="", help="Free-text feedback")
@click.option("--suggestion", "-s", multiple=True, help='Adjustment such as "more casual" (repeatable)')
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    help="JSONL audit log to append the record to (defaults to PROFILE.feedback.jsonl)",
)
@click.option("--output", "-o", type=click.Path(), help="Output path (defaults to overwriting the profile)")
@handle_errors
def feedback(
    profile_path: str,
    rating: int,
    content_id: str,
    comment: str,
    suggestion: tuple[str, ...],
    output: str | None,
    log_file: str | None,
) -> None:
    """Apply a rating and suggestions to a saved profile.

    Every record is appended to the audit log, whether or not it changed the profile.
    """
    from brand_voice_engine.feedback import FeedbackIncorporator, FeedbackLog
    from brand_voice_engine.models import VoiceFeedback

    profile = _load_profile(profile_path)
    record = VoiceFeedback(
        content_id=content_id,
        voice_profile_id=profile.id,
        rating=rating,
        feedback=comment,
        suggestions=list(suggestion) or None,
    )
    log = FeedbackLog()
    updated = FeedbackIncorporator(_config(), log=log).incorporate(profile, record)
    log_path = Path(log_file) if log_file else Path(profile_path).with_suffix(".feedback.jsonl")
    with log_path.open("a", encoding="utf-8") as f:
        for entry in log:
            f.write(entry.model_dump_json() + "\n")

    console.print(f"Confidence: {profile.confidence:.0%} -> {updated.confidence:.0%}")
    if updated.characteristics != profile.characteristics:
        console.print(f"Formality: {updated.characteristics.formality.value}")
    _save_profile(updated, output or profile_path)
    console.print(f"[green]OK[/green] Profile saved to {output or profile_path}")


@main.command()
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), help="Write each template as a profile JSON")
@handle_errors
def templates(output_dir: str | None) -> None:
    """List the predefined starter voices."""
    from brand_voice_engine.profile import VOICE_TEMPLATES, ProfileBuilder

    table = Table(title="Voice Templates")
    table.add_column("Template", style="cyan")
    table.add_column("Tone")
    table.add_column("Formality")
    table.add_column("Perspective")

    builder = ProfileBuilder(_config())
    for name, characteristics in VOICE_TEMPLATES.items():
        table.add_row(
            name,
            characteristics.tone.value,
            characteristics.formality.value,
            characteristics.perspective.value,
        )
        if output_dir:
            profile = builder.from_template(name.replace("_", " ").title(), name, profile_id=f"template_{name}")
            _save_profile(profile, str(Path(output_dir) / f"{name}.json"))

    console.print(table)


if __name__ == "__main__":
    main()
