#!/usr/bin/env python3
"""
CLI for League Of Nads match simulation
"""
import random
from collections import Counter
from statistics import mean, pvariance

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import track

from nads_league.config import settings
from nads_league.database import init_db, get_session
from nads_league.logging_config import configure_logging
from nads_league.engine import MatchEngine, GameStateManager, ScoreLedger, build_leaderboard
from nads_league.engine.match_engine import (
    get_strategy_multipliers, get_environmental_multipliers,
    get_strategy_description, get_environmental_description,
)
from nads_league.engine.tables import (
    STRATEGY_CATEGORIES, ENVIRONMENT_CATEGORIES,
    STRATEGY_MULTIPLIERS, ENVIRONMENT_MULTIPLIERS,
)
from nads_league.validators import StrategyChoiceValidator

console = Console()

DEFAULT_CHOICES = {
    "formation": "4-4-2",
    "defensive_philosophy": "Mid Block",
    "training_focus": "Team Shape",
    "attacking_approach": "Long Balls",
    "striker_role": "Target Man",
    "tempo_style": "Controlled Pace",
    "match_mentality": "Expressive",
}


def strategy_options(func):
    """Add one --option per strategic category"""
    for category in reversed(STRATEGY_CATEGORIES):
        func = click.option(
            f"--{category.replace('_', '-')}",
            category,
            default=DEFAULT_CHOICES[category],
            show_default=True,
            type=click.Choice(list(STRATEGY_MULTIPLIERS[category])),
        )(func)
    return func


def _collect_choices(kwargs: dict) -> dict:
    return {category: kwargs.pop(category) for category in STRATEGY_CATEGORIES}


@click.group()
@click.option("--log-level", default=settings.LOG_LEVEL, help="Logging level")
def cli(log_level: str):
    """League Of Nads - Football Manager Mini-Game"""
    configure_logging(log_level)


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
def options():
    """List every strategic and environmental option"""
    for title, categories, tables, describe in (
        ("Strategic Choices", STRATEGY_CATEGORIES, STRATEGY_MULTIPLIERS, get_strategy_description),
        ("Environmental Factors", ENVIRONMENT_CATEGORIES, ENVIRONMENT_MULTIPLIERS, get_environmental_description),
    ):
        table = Table(title=title)
        table.add_column("Category", style="cyan")
        table.add_column("Option")
        table.add_column("x", justify="right", style="green")
        table.add_column("Description")
        for category in categories:
            for name, value in tables[category].items():
                table.add_row(category, name, f"{value:.2f}", describe(name, category))
        console.print(table)


@cli.command()
@strategy_options
@click.option("--efficiency", default=0.0, type=click.FloatRange(min=0), help="Historical goals per match")
@click.option("--seed", default=None, type=int, help="Random seed")
@click.option("--wallet", default=None, help="Record the result for this wallet")
def simulate(efficiency: float, seed, wallet, **kwargs):
    """Simulate a single match"""
    choices = _collect_choices(kwargs)
    validation = StrategyChoiceValidator.validate(choices)
    if not validation["valid"]:
        for error in validation["errors"]:
            console.print(f"[red]{error}[/red]")
        return

    rng = random.Random(seed)

    if wallet:
        init_db()
        session = get_session()
        try:
            outcome, stats = GameStateManager(session, rng).play_match(wallet, choices)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return
        finally:
            session.close()
    else:
        try:
            outcome = MatchEngine(rng).simulate(choices, efficiency)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return
        stats = None

    table = Table(title="Multiplier Breakdown")
    table.add_column("Category", style="cyan")
    table.add_column("Selection")
    table.add_column("x", justify="right", style="green")
    for category, value in get_strategy_multipliers(outcome.strategy_choices).items():
        table.add_row(category, outcome.strategy_choices[category], f"{value:.2f}")
    for category, value in get_environmental_multipliers(outcome.environmental_factors).items():
        table.add_row(category, f"[magenta]{outcome.environmental_factors[category]}[/magenta]", f"{value:.2f}")
    console.print(table)

    console.print(Panel(f"[bold]{outcome.goals_scored} goal(s)[/bold]", title=outcome.match_id))
    console.print(f"[cyan]Strategy x:[/cyan] {outcome.strategy_multiplier:.3f}")
    console.print(f"[cyan]Environment x:[/cyan] {outcome.environmental_multiplier:.3f}")
    console.print(f"[cyan]Efficiency bonus:[/cyan] {outcome.efficiency_bonus:.2f}")
    console.print(f"[cyan]Lambda:[/cyan] {outcome.lam:.3f}")

    if stats is not None:
        console.print(
            f"\n[green]Recorded.[/green] {stats.wallet_address}: "
            f"{stats.total_goals} goals in {stats.total_matches} matches ({stats.efficiency:.2f}/match)"
        )


@cli.command()
@strategy_options
@click.option("--trials", default=10000, type=click.IntRange(min=1), help="Number of matches to simulate")
@click.option("--efficiency", default=0.0, type=click.FloatRange(min=0), help="Historical goals per match")
@click.option("--seed", default=None, type=int, help="Random seed")
def distribution(trials: int, efficiency: float, seed, **kwargs):
    """Run many simulations and report the goal distribution"""
    choices = _collect_choices(kwargs)
    engine = MatchEngine(random.Random(seed))

    goals = []
    lams = []
    for _ in track(range(trials), description="Simulating..."):
        try:
            outcome = engine.simulate(choices, efficiency)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return
        goals.append(outcome.goals_scored)
        lams.append(outcome.lam)

    console.print(Panel("[bold]Simulation Statistics[/bold]"))
    console.print(f"[cyan]Mean Goals:[/cyan] {mean(goals):.3f}")
    console.print(f"[cyan]Variance:[/cyan] {pvariance(goals):.3f}")
    console.print(f"[cyan]Mean Lambda:[/cyan] {mean(lams):.3f}")
    console.print(f"[cyan]Lambda Range:[/cyan] {min(lams):.3f} - {max(lams):.3f}")

    counts = Counter(goals)
    console.print("\n[bold]Goal Distribution:[/bold]")
    for n in range(max(counts) + 1):
        pct = counts.get(n, 0) / trials * 100
        bar = "█" * int(pct / 2)
        console.print(f"  {n:>3}: {bar} {pct:.1f}%")


@cli.command()
@click.option("--limit", default=20, help="Rows to show")
def leaderboard(limit: int):
    """Show the leaderboard"""
    init_db()
    session = get_session()
    try:
        entries = build_leaderboard(ScoreLedger(session).tracked_players())
    finally:
        session.close()

    if not entries:
        console.print("[red]No matches played yet.[/red]")
        return

    table = Table(title="Leaderboard")
    table.add_column("#", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("Wallet")
    table.add_column("Goals", justify="right")
    table.add_column("Matches", justify="right")
    table.add_column("Goals/Match", justify="right", style="green")
    for entry in entries[:limit]:
        table.add_row(
            str(entry.rank),
            entry.username,
            entry.wallet_address,
            str(entry.total_goals),
            str(entry.total_matches),
            f"{entry.efficiency:.2f}",
        )
    console.print(table)


if __name__ == "__main__":
    cli()
