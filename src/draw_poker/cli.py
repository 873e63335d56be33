"""Command-line interface for ranking poker hands."""
import json
import logging
import sys
from typing import List, Optional

import click

from draw_poker.config.loader import LOG_LEVELS, EvaluatorConfig, load_config
from draw_poker.core.deck import Deck
from draw_poker.core.exceptions import PokerError
from draw_poker.core.hand import Player
from draw_poker.evaluation.constants import MAX_PLAYERS
from draw_poker.evaluation.evaluator import HandEvaluator
from draw_poker.evaluation.types import PlayerResult

logger = logging.getLogger(__name__)


def setup_logging(level: str = 'INFO') -> None:
    """Set up root logging for command line runs."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )


def parse_player(index: int, spec: str) -> Player:
    """Parse 'id=AS KS QS JS 10S'; without an id the player is named p<index>."""
    player_id, sep, cards = spec.partition('=')
    if not sep:
        player_id, cards = f"p{index}", spec
    player_id = player_id.strip()
    if not player_id:
        raise click.BadParameter(f"Missing player id in '{spec}'", param_hint='HANDS')
    return Player.from_string(player_id, cards)


def echo_results(results: List[PlayerResult], players: List[Player], as_json: bool) -> None:
    """Print a ranking, strongest hand first."""
    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    hands = {player.id: player for player in players}
    for position, result in enumerate(results, 1):
        line = f"{position}. {hands[result.id]}  {result.name} (tie breaker {result.tie_breaker_card_rank}"
        if result.tie_breaker_total_rank is not None:
            line += f", total {result.tie_breaker_total_rank}"
        click.echo(line + ")")


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='JSON configuration file')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Override the configured log level')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str]):
    """Five-card poker hand evaluator."""
    try:
        config = load_config(config_path)
    except PokerError as e:
        raise click.ClickException(str(e))

    setup_logging(log_level or config.log_level)
    ctx.obj = config


@cli.command()
@click.argument('hands', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.pass_obj
def rank(config: EvaluatorConfig, hands, as_json: bool):
    """Rank the given hands, e.g. "p1=AS KS QS JS 10S" "p2=KD QD JD 10D 9D"."""
    try:
        players = [parse_player(i, spec) for i, spec in enumerate(hands, 1)]
        seen = set()
        for player in players:
            if player.id in seen:
                raise click.BadParameter(f"Duplicate player id '{player.id}'", param_hint='HANDS')
            seen.add(player.id)
        evaluator = HandEvaluator(deck=Deck(pre_shuffle=False), config=config)
        results = evaluator.evaluate_hands(players)
    except PokerError as e:
        raise click.ClickException(str(e))

    echo_results(results, players, as_json)


@cli.command()
@click.option('--players', 'num_players', type=click.IntRange(1, MAX_PLAYERS), default=None,
              help='Number of hands to deal')
@click.option('--seed', type=int, default=None, help='Seed for a repeatable deal')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.pass_obj
def deal(config: EvaluatorConfig, num_players: Optional[int], seed: Optional[int], as_json: bool):
    """Deal hands from a fresh deck and rank them."""
    num_players = num_players or config.players
    if seed is None:
        seed = config.seed

    try:
        logger.debug(f"Dealing {num_players} hand(s) with seed {seed}")
        evaluator = HandEvaluator(deck=Deck(pre_shuffle=config.pre_shuffle, seed=seed), config=config)
        players = evaluator.deal_players(f"p{i}" for i in range(1, num_players + 1))
        results = evaluator.evaluate_hands(players)
    except PokerError as e:
        raise click.ClickException(str(e))

    echo_results(results, players, as_json)


def main():
    cli()
