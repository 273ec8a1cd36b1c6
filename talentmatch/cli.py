"""
TalentMatch Command Line Interface

Provides CLI commands for ranking candidates against a job posting,
ranking jobs for a candidate, and summarizing a matching workload.
Input is read from JSON files.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from talentmatch.core.exceptions import TalentMatchError
from talentmatch.core.matching import MatchingEngine, compute_matching_stats, select_top
from talentmatch.data import find_candidate, load_candidates, load_job, load_jobs
from talentmatch.utils.config import get_settings
from talentmatch.utils.constants import AuditAction, MatchScoreLevel
from talentmatch.utils.logger import audit_log, setup_logging

app = typer.Typer(
    name="talentmatch",
    help="Skill and experience based candidate ranking",
    add_completion=False,
)
console = Console()

LEVEL_COLORS = {
    MatchScoreLevel.EXCELLENT: "green",
    MatchScoreLevel.GOOD: "blue",
    MatchScoreLevel.FAIR: "yellow",
    MatchScoreLevel.POOR: "red",
}


@app.callback()
def main():
    """Skill and experience based candidate ranking."""
    setup_logging()


def _build_engine(experience_cap: Optional[int], location_bonus: Optional[float]) -> MatchingEngine:
    """Build an engine from settings, letting command-line options win."""
    matching = get_settings().matching
    try:
        return MatchingEngine(
            weights=matching.weights,
            experience_cap=experience_cap if experience_cap is not None else matching.experience_cap,
            location_bonus=location_bonus if location_bonus is not None else matching.location_bonus,
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _resolve_limit(top_n: Optional[int]) -> int:
    return top_n if top_n is not None else get_settings().matching.default_limit


def _format_level(score: float) -> str:
    level = MatchScoreLevel.from_score(score)
    color = LEVEL_COLORS[level]
    return f"[{color}]{level.value.upper()}[/{color}]"


def _format_location(location_match: Optional[bool]) -> str:
    if location_match is None:
        return "[dim]-[/dim]"
    return "✓" if location_match else "✗"


@app.command()
def version():
    """Show application version."""
    from talentmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective scoring configuration."""
    settings = get_settings()

    table = Table(title="TalentMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Skills Weight", f"{settings.matching.skills_weight:.2f}")
    table.add_row("Experience Weight", f"{settings.matching.experience_weight:.2f}")
    table.add_row("Experience Cap", f"{settings.matching.experience_cap} years")
    table.add_row("Location Bonus", f"{settings.matching.location_bonus:+.1f}")
    table.add_row("Default Limit", str(settings.matching.default_limit))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match(
    job_file: Path = typer.Argument(..., help="JSON file describing the job requirement"),
    candidates_file: Path = typer.Argument(..., help="JSON file listing candidate profiles"),
    top_n: Optional[int] = typer.Option(None, "--top", "-n", min=0, help="Number of top matches to show"),
    min_score: float = typer.Option(0.0, "--min-score", "-t", help="Minimum score threshold (0-100)"),
    experience_cap: Optional[int] = typer.Option(None, "--experience-cap", help="Years that earn full experience credit"),
    location_bonus: Optional[float] = typer.Option(None, "--location-bonus", help="Points added on a location match"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Rank candidates against a job posting."""
    engine = _build_engine(experience_cap, location_bonus)

    try:
        job = load_job(job_file)
        candidates = load_candidates(candidates_file)
        ranked = engine.rank(job, candidates)
    except TalentMatchError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    results = select_top(ranked, min_score=min_score, limit=_resolve_limit(top_n))

    audit_log(
        AuditAction.CANDIDATES_RANKED.value,
        {
            "job_id": job.job_id,
            "candidates": len(candidates),
            "returned": len(results),
            "min_score": min_score,
            "top": [(r.candidate_id, round(r.score, 2)) for r in results[:10]],
        },
    )

    if as_json:
        typer.echo(json.dumps(
            {
                "job": job.model_dump(mode="json"),
                "evaluated": len(candidates),
                "match_count": len(results),
                "matches": [r.model_dump(mode="json") for r in results],
            },
            indent=2,
        ))
        return

    console.print(f"[yellow]Matching {len(candidates)} candidate(s) for: {job.display_title}[/yellow]")

    if not results:
        console.print("[yellow]No candidates matched the threshold.[/yellow]")
        return

    names = {c.id: c.display_name for c in candidates}

    table = Table(title=f"Top {len(results)} Matches for {job.display_title}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Candidate", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Skills", justify="right")
    table.add_column("Exp", justify="right")
    table.add_column("Loc", justify="center")

    for i, scored in enumerate(results, 1):
        table.add_row(
            str(i),
            names.get(scored.candidate_id, scored.candidate_id),
            f"{scored.score:.2f}",
            _format_level(scored.score),
            f"{scored.skill_overlap_count}/{len(job.required_skills)}",
            str(scored.experience_years),
            _format_location(scored.location_match),
        )

    console.print(table)

    top = results[0]
    console.print("\n[bold]Top Match:[/bold]")
    if top.matched_skills:
        console.print(f"  [green]Matched:[/green] {', '.join(sorted(top.matched_skills))}")
    if top.missing_skills:
        console.print(f"  [yellow]Missing:[/yellow] {', '.join(sorted(top.missing_skills))}")


@app.command("jobs-for")
def jobs_for(
    candidate_id: str = typer.Argument(..., help="Candidate ID to find jobs for"),
    jobs_file: Path = typer.Argument(..., help="JSON file listing job requirements"),
    candidates_file: Path = typer.Argument(..., help="JSON file listing candidate profiles"),
    top_n: Optional[int] = typer.Option(None, "--top", "-n", min=0, help="Number of top jobs to show"),
    min_score: float = typer.Option(0.0, "--min-score", "-t", help="Minimum score threshold (0-100)"),
    experience_cap: Optional[int] = typer.Option(None, "--experience-cap", help="Years that earn full experience credit"),
    location_bonus: Optional[float] = typer.Option(None, "--location-bonus", help="Points added on a location match"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Rank active jobs for one candidate."""
    engine = _build_engine(experience_cap, location_bonus)

    try:
        jobs = load_jobs(jobs_file)
        candidates = load_candidates(candidates_file)
    except TalentMatchError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    candidate = find_candidate(candidates, candidate_id)
    if candidate is None:
        console.print(f"[red]Error: Candidate not found: {candidate_id}[/red]")
        raise typer.Exit(1)

    try:
        ranked = engine.rank_jobs(candidate, jobs)
    except TalentMatchError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    results = select_top(ranked, min_score=min_score, limit=_resolve_limit(top_n))

    audit_log(
        AuditAction.JOBS_RANKED.value,
        {
            "candidate": candidate,
            "jobs": len(jobs),
            "returned": len(results),
            "min_score": min_score,
        },
    )

    if as_json:
        typer.echo(json.dumps(
            {
                "candidate": candidate.model_dump(mode="json"),
                "match_count": len(results),
                "job_matches": [r.model_dump(mode="json") for r in results],
            },
            indent=2,
        ))
        return

    if not results:
        console.print("[yellow]No jobs matched the threshold.[/yellow]")
        return

    table = Table(title=f"Top {len(results)} Jobs for {candidate.display_name}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Job", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Matched", justify="right")
    table.add_column("Loc", justify="center")

    for i, job_match in enumerate(results, 1):
        table.add_row(
            str(i),
            job_match.title or job_match.job_id or "-",
            f"{job_match.score:.2f}",
            _format_level(job_match.score),
            str(job_match.skill_overlap_count),
            _format_location(job_match.location_match),
        )

    console.print(table)


@app.command()
def stats(
    jobs_file: Path = typer.Argument(..., help="JSON file listing job requirements"),
    candidates_file: Path = typer.Argument(..., help="JSON file listing candidate profiles"),
    as_json: bool = typer.Option(False, "--json", help="Print statistics as JSON"),
):
    """Show matching workload statistics."""
    try:
        jobs = load_jobs(jobs_file)
        candidates = load_candidates(candidates_file)
    except TalentMatchError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    summary = compute_matching_stats(jobs, candidates)
    audit_log(AuditAction.STATS_COMPUTED.value, summary.model_dump(), audit_type="ACCESS")

    if as_json:
        typer.echo(json.dumps(summary.model_dump(mode="json"), indent=2))
        return

    table = Table(title="Matching Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Active Jobs", str(summary.total_active_jobs))
    table.add_row("Candidates", str(summary.total_candidates))
    table.add_row("Avg Requirements / Job", f"{summary.average_requirements_per_job:.2f}")
    table.add_row("Avg Skills / Candidate", f"{summary.average_skills_per_candidate:.2f}")
    table.add_row("Potential Matches", str(summary.potential_matches))

    console.print(table)


if __name__ == "__main__":
    app()
