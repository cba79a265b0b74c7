"""CLI interface for ReelPass using Typer."""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config.loader import load_config
from ..core.config.scoring import ScoringConfig
from ..core.scoring import SCORE_LEVELS, build_score_preview, get_score_level_info
from ..core.models.skill import Skill
from ..core.storage.skill_file import SkillFileError, load_skills, save_report
from ..observability.logger import LoggingConfig, configure_logging, get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="reelpass",
    help="ReelPass - score self-reported skills and see what verification would add",
    add_completion=False,
)

COMPONENT_LABELS = {
    "base_score": "Skills Added",
    "proficiency_bonus": "Proficiency Levels",
    "experience_bonus": "Experience",
    "diversity_bonus": "Skill Diversity",
    "verification_bonus": "Verification",
    "ai_rating_bonus": "AI Ratings",
}


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    ] = None,
    log_format: Annotated[
        str | None, typer.Option("--log-format", help="Log output format (json or console)")
    ] = None,
):
    """Configure logging from config, then command-line overrides."""
    try:
        logging_config = LoggingConfig.from_config(load_config(), level=log_level, fmt=log_format)
    except ValidationError as e:
        console.print(f"[red]! Invalid logging configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    configure_logging(logging_config)


def _get_scoring_config() -> ScoringConfig:
    """Get scoring parameters from config."""
    try:
        return ScoringConfig.from_config(load_config())
    except ValidationError as e:
        console.print(f"[red]! Invalid scoring configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _load_skills_or_exit(skills_file: Path) -> list[Skill]:
    try:
        return load_skills(skills_file)
    except SkillFileError as e:
        logger.error("skill_file_rejected", path=str(e.path))
        console.print(f"[red]! Error loading skills:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


SkillsFileArg = Annotated[
    Path,
    typer.Argument(
        help="JSON or YAML file with skill records",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
]


@app.command()
def score(
    skills_file: SkillsFileArg,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Path to save the score report as JSON"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the report as JSON instead of tables")
    ] = False,
):
    """Compute the ReelPass Score for a skill collection."""
    config = _get_scoring_config()
    skills = _load_skills_or_exit(skills_file)
    preview = build_score_preview(skills, config)
    details = preview.details

    logger.info(
        "score_command_completed",
        skill_count=len(skills),
        score=details.current_score,
        potential=preview.potential_score,
    )

    if as_json:
        typer.echo(json.dumps(preview.model_dump(mode="json"), indent=2))
    else:
        console.print(
            f"\n[bold blue]ReelPass Score:[/bold blue] {details.current_score}"
            f" / {details.max_score} ({details.breakdown.percentage_complete}%)"
        )
        console.print(f"[bold]Level:[/bold] {details.level_name} ({details.level_progress}%)")
        if preview.level_info.next_level:
            console.print(f"[dim]Next level:[/dim] {preview.level_info.next_level.name}")

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Component")
        table.add_column("Points", justify="right")
        for key, points in details.breakdown.components.items():
            table.add_row(COMPONENT_LABELS[key], f"{points:g}")
        table.add_row("[bold]Total[/bold]", f"[bold]{details.current_score}[/bold]")
        console.print(table)

        if preview.potential_gain > 0:
            console.print(
                f"\n[bold]Potential Score:[/bold] {preview.potential_score}"
                f" [green](+{preview.potential_gain} points)[/green]"
            )

        if details.recommendations:
            console.print("\n[bold]Recommendations:[/bold]")
            for rec in details.recommendations:
                console.print(f"  - {rec}")

        console.print("\n[bold]Next Steps:[/bold]")
        for idx, step in enumerate(details.next_steps, start=1):
            console.print(f"  {idx}. {step}")

    if output_file:
        try:
            save_report(output_file, preview)
            console.print(f"\n[green]Report saved to:[/green] {output_file}")
        except OSError as e:
            console.print(f"\n[red]! Error saving report:[/red] {escape(str(e))}")
            raise typer.Exit(code=1)


@app.command()
def potential(skills_file: SkillsFileArg):
    """Show how much full verification would add to the score."""
    config = _get_scoring_config()
    skills = _load_skills_or_exit(skills_file)
    preview = build_score_preview(skills, config)

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Current Score", str(preview.details.current_score))
    table.add_row("Potential Score", str(preview.potential_score))
    table.add_row("Gain", f"+{preview.potential_gain}")
    console.print(table)


@app.command()
def level(
    score_value: Annotated[int, typer.Argument(metavar="SCORE", help="A known ReelPass Score")],
):
    """Show tier and progress for a known score."""
    top = SCORE_LEVELS[-1].max_score
    if not 0 <= score_value <= top:
        console.print(f"[red]! Error:[/red] SCORE must be between 0 and {top}")
        raise typer.Exit(code=1)

    info = get_score_level_info(score_value)
    console.print(f"[bold]{info.name}[/bold] ({info.min_score}-{info.max_score})")
    console.print(f"Progress: {info.progress}%")
    if info.next_level:
        points_needed = info.next_level.min_score - score_value
        console.print(f"Next level: {info.next_level.name} in {points_needed} points")
    else:
        console.print("Top level reached")


if __name__ == "__main__":
    app()
