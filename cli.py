"""
Evidence Scoring CLI - Command line interface for scoring evidence files.

Usage:
    python cli.py relevance <links.json>
    python cli.py rank <candidates.json> <links.json> --target ID
    python cli.py preponderance <links.json> [--target ID]
    python cli.py score <links.json> --rating R --prior P [--ratings FILE]
    python cli.py points --veracity V --stance S
"""

import argparse
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from evidence_scoring.config import Config
from evidence_scoring.domain.models import Candidate, EvidenceLink, QualityRating
from evidence_scoring.domain.validation import (
    DomainValidationError,
    check_points_inputs,
    validate_links,
)
from evidence_scoring.scoring.relevance import compute_relevance
from evidence_scoring.scoring.ranking import enrich, top_relevant, needs_more_evidence
from evidence_scoring.scoring.preponderance import aggregate_preponderance, aggregate_for_target
from evidence_scoring.scoring.performance import score_user
from evidence_scoring.scoring.game_points import (
    compute_link_points,
    link_points_range,
    format_points,
)

console = Console()

STANCE_COLORS = {
    'support': 'green',
    'refute': 'red',
    'nuance': 'yellow',
    'insufficient': 'dim',
}


class InputError(Exception):
    """An input file could not be read or parsed."""


def _load_json_list(path: str, item_type):
    """Load a JSON array file into a list of models."""
    file_path = Path(path)
    if not file_path.exists():
        raise InputError(f"File not found: {file_path}")

    try:
        return TypeAdapter(list[item_type]).validate_json(file_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise InputError(f"Invalid data in {file_path}:\n{e}") from e


def load_links(path: str, strict: bool = False) -> list[EvidenceLink]:
    """Load evidence links from a JSON file and check their domains."""
    links = _load_json_list(path, EvidenceLink)
    try:
        issues = validate_links(links, strict=strict)
    except DomainValidationError as e:
        raise InputError("Links out of range:\n  - " + "\n  - ".join(e.issues)) from e

    for issue in issues:
        console.print(f"[yellow]Warning:[/yellow] {escape(issue)}")
    return links


def _stance_cell(stance: str | None) -> str:
    if stance is None:
        return "[dim]-[/dim]"
    color = STANCE_COLORS.get(stance, 'white')
    return f"[{color}]{stance}[/{color}]"


def cmd_relevance(args):
    """Display the relevance score of each link."""
    links = load_links(args.links, args.strict)

    table = Table(title=f"Link Relevance ({len(links)} links)")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="cyan")
    table.add_column("Stance")
    table.add_column("Conf", style="white")
    table.add_column("Support", style="white")
    table.add_column("Relevance", style="green")

    for link in links:
        table.add_row(
            str(link.source_id),
            str(link.target_id),
            _stance_cell(link.stance),
            f"{link.confidence:.2f}",
            f"{link.support_level:+.2f}",
            f"{compute_relevance(link):.1f}",
        )

    console.print(table)


def cmd_rank(args):
    """Rank candidates by relevance to a task claim."""
    candidates = _load_json_list(args.candidates, Candidate)
    links = load_links(args.links, args.strict)
    target_id = args.target
    limit = args.limit or Config.TOP_RELEVANT_LIMIT

    ranked = top_relevant(enrich(candidates, target_id, links), limit)

    table = Table(title=f"Top {len(ranked)} of {len(candidates)} candidates for task claim {target_id}")
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="cyan")
    table.add_column("Text", style="white", max_width=50)
    table.add_column("Stance")
    table.add_column("Relevance", style="green")

    for position, item in enumerate(ranked, start=1):
        text = item.candidate.text or ""
        text = text[:60] + "..." if len(text) > 60 else text
        table.add_row(
            str(position),
            str(item.candidate.id),
            escape(text),
            _stance_cell(item.stance),
            f"{item.relevance_score:.1f}" if item.has_link else "[dim]unlinked[/dim]",
        )

    console.print(table)

    if needs_more_evidence(candidates, target_id, links, Config.EVIDENCE_LINK_RATIO):
        console.print(
            f"[yellow]Fewer than {Config.EVIDENCE_LINK_RATIO:.0%} of candidates are "
            f"linked to this task claim. Consider running an assessment.[/yellow]"
        )


def cmd_preponderance(args):
    """Display what the evidence says overall."""
    links = load_links(args.links, args.strict)

    if args.target is not None:
        result = aggregate_for_target(links, args.target)
    else:
        result = aggregate_preponderance(links)

    console.print(Panel.fit(
        f"[bold blue]Evidence Truth Score: {result.evidence_truth_score}[/bold blue]",
        border_style="blue"
    ))

    weights_table = Table(show_header=False, box=None)
    weights_table.add_column("Metric", style="cyan")
    weights_table.add_column("Value", style="green")

    weights_table.add_row("Support Weight", f"{result.support_weight:.1f}")
    weights_table.add_row("Refute Weight", f"{result.refute_weight:.1f}")
    weights_table.add_row("Nuance Weight", f"{result.nuance_weight:.1f}")
    weights_table.add_row("Total Weight", f"{result.total_weight:.1f}")

    console.print(weights_table)
    console.print()

    breakdown = result.breakdown
    breakdown_table = Table(title="Stance Breakdown")
    breakdown_table.add_column("Stance")
    breakdown_table.add_column("Count", style="green")

    breakdown_table.add_row(_stance_cell("support"), str(breakdown.supports))
    breakdown_table.add_row(_stance_cell("refute"), str(breakdown.refutes))
    breakdown_table.add_row(_stance_cell("nuance"), str(breakdown.nuances))
    breakdown_table.add_row(_stance_cell("insufficient"), str(breakdown.insufficient))

    console.print(breakdown_table)

    if not result.has_signal:
        console.print("[yellow]No weighted evidence - score is the neutral prior[/yellow]")


def cmd_score(args):
    """Score a user's final rating against the evidence."""
    links = load_links(args.links, args.strict)
    ratings = _load_json_list(args.ratings, QualityRating) if args.ratings else []

    if args.target is not None:
        preponderance = aggregate_for_target(links, args.target)
    else:
        preponderance = aggregate_preponderance(links)

    result = score_user(args.rating, args.prior, preponderance, ratings)

    console.print(Panel.fit(
        f"[bold blue]Grade {result.grade}[/bold blue]  "
        f"{'★' * result.stars}{'☆' * (5 - result.stars)}",
        border_style="blue"
    ))

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Evidence Truth Score", str(result.evidence_truth_score))
    table.add_row("Your Rating", f"{args.rating:g}")
    table.add_row("Gap", f"{result.gap:g}")
    table.add_row("Accuracy", f"{result.accuracy_score:g}")
    table.add_row("Honesty", f"{result.honesty_score:g}")
    table.add_row("Mind Change Bonus", str(result.mind_change_bonus))
    table.add_row("Total", f"[bold]{result.total:g}[/bold]")

    console.print(table)


def cmd_points(args):
    """Show the points for one link action."""
    for issue in check_points_inputs(args.veracity, args.stance):
        console.print(f"[yellow]Warning:[/yellow] {escape(issue)}")

    points = compute_link_points(args.veracity, args.stance)
    points_range = link_points_range(args.veracity)

    color = "green" if points >= 0 else "red"
    console.print(f"Points: [{color}]{format_points(points)}[/{color}]")
    console.print(
        f"Range for veracity {args.veracity:g}: "
        f"best {format_points(points_range.best)}, worst {format_points(points_range.worst)}"
    )


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Evidence Scoring CLI - relevance, preponderance and user scores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    strict_parent = argparse.ArgumentParser(add_help=False)
    strict_parent.add_argument(
        "--strict",
        action="store_true",
        default=Config.STRICT_DOMAIN_CHECKS,
        help="Fail on links with out-of-range values"
    )

    # Relevance command
    relevance_parser = subparsers.add_parser(
        "relevance", parents=[strict_parent], help="Score the relevance of each link"
    )
    relevance_parser.add_argument("links", help="JSON file of evidence links")

    # Rank command
    rank_parser = subparsers.add_parser(
        "rank", parents=[strict_parent], help="Rank candidates for a task claim"
    )
    rank_parser.add_argument("candidates", help="JSON file of candidates")
    rank_parser.add_argument("links", help="JSON file of evidence links")
    rank_parser.add_argument("--target", "-t", required=True, help="Task claim ID")
    rank_parser.add_argument("--limit", "-n", type=int, help="Max candidates to show")

    # Preponderance command
    preponderance_parser = subparsers.add_parser(
        "preponderance", parents=[strict_parent], help="Aggregate the evidence for a task claim"
    )
    preponderance_parser.add_argument("links", help="JSON file of evidence links")
    preponderance_parser.add_argument("--target", "-t", help="Only use links to this task claim")

    # Score command
    score_parser = subparsers.add_parser(
        "score", parents=[strict_parent], help="Score a user's rating against the evidence"
    )
    score_parser.add_argument("links", help="JSON file of evidence links")
    score_parser.add_argument("--rating", "-r", type=float, required=True, help="Final rating (0-100)")
    score_parser.add_argument("--prior", "-p", type=float, required=True, help="Prior belief (0-100)")
    score_parser.add_argument("--ratings", help="JSON file of user/AI quality ratings")
    score_parser.add_argument("--target", "-t", help="Only use links to this task claim")

    # Points command
    points_parser = subparsers.add_parser("points", help="Points for one link action")
    points_parser.add_argument("--veracity", "-v", type=float, required=True, help="AI veracity (-100 to 100)")
    points_parser.add_argument("--stance", "-s", type=float, required=True, help="User stance (-1.2 to 1.2)")

    args = parser.parse_args(argv)

    Config.setup_logging(args.log_level)

    config_issues = Config.validate()
    if config_issues:
        console.print("[red]Configuration Error:[/red]")
        for issue in config_issues:
            console.print(f"  - {issue}")
        console.print("\nCheck the settings in your .env file.")
        sys.exit(1)

    commands = {
        "relevance": cmd_relevance,
        "rank": cmd_rank,
        "preponderance": cmd_preponderance,
        "score": cmd_score,
        "points": cmd_points,
    }

    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except InputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
