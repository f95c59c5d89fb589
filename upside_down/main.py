"""
Main entry point for the Upside Down RPG.

Sets up logging, shows the main menu and plays campaigns until the player
decides to exit. A campaign starts with the choice of a hero and ends with
the defeat of the Mind Flayer or the death of the hero.
"""

import argparse
import logging
from datetime import datetime

from campaign.campaign import Campaign
from character.hero import create_hero
from core.constants import BOSS_TURN_THRESHOLD
from core.dice import RandomSource
from core.logging import setup_logging
from core.utils import cprint, crule
from ui.cli_interface import PlayerInterface
from ui.narration import Narrator


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="upside-down",
        description="A turn-based combat adventure in the Upside Down.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source, to replay a run.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the debug log of every roll and decision.",
    )
    return parser.parse_args(argv)


def show_banner() -> None:
    crule("THE UPSIDE DOWN", style="bold red")
    cprint(f"[dim]{datetime.now():%A, %d %B %Y}[/]", justify="center")
    cprint(
        "Survive the Upside Down. Battle its creatures, find treasure and "
        f"face the Mind Flayer, who comes for you after {BOSS_TURN_THRESHOLD} turns.\n",
        style="bold blue",
    )


def play(interface: PlayerInterface, campaign: Campaign | None, dice: RandomSource) -> Campaign:
    """
    Plays a single campaign, from the hero selection to its end.

    Args:
        interface (PlayerInterface):
            The interface providing the player's decisions.
        campaign (Campaign | None):
            The previous campaign, reset for the new hero, or None on the
            first run.
        dice (RandomSource):
            The random source shared by every run.

    Returns:
        Campaign:
            The finished campaign.

    """
    kind = interface.choose_hero()
    hero = create_hero(kind)
    Narrator.hero_chosen(hero.name)
    cprint(str(hero))
    Narrator.journey_begins()
    if campaign is None:
        campaign = Campaign(hero, dice)
    else:
        campaign.reset(hero)
    result = campaign.run(interface)
    Narrator.campaign_over(result)
    cprint(f"Turns survived: {campaign.turn} | Gold: {hero.inventory.gold}")
    return campaign


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    dice = RandomSource(args.seed)
    interface = PlayerInterface()

    show_banner()
    Narrator.welcome()
    campaign: Campaign | None = None
    if interface.main_menu():
        while True:
            campaign = play(interface, campaign, dice)
            if not interface.confirm("Play again?"):
                break
    Narrator.farewell()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
