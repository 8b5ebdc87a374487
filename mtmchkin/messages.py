"""Text shown to the players during a game.

Each function returns the full block of text, newlines included.
"""

from __future__ import annotations

from typing import Protocol

LEADERBOARD_NAME_WIDTH = 16
LEADERBOARD_COLUMN_WIDTH = 6


class _Described(Protocol):
    def description(self) -> str: ...


class _Ranked(Protocol):
    name: str
    level: int
    force: int
    health_points: int
    coins: int


def start_message() -> str:
    return "Game is about to start!\nThese are the players:\n\n"


def start_player_entry(index: int, player: _Described) -> str:
    return f"{index}. {player.description()}\n"


def turn_details(index: int, player: _Described, card: _Described) -> str:
    return (
        f"Turn: {index}\n"
        f"Player: {player.description()}\n"
        f"Card: {card.description()}\n"
    )


def turn_outcome(outcome: str) -> str:
    return f"{outcome}\n\n"


def round_start() -> str:
    return "New round starts!\n\n"


def round_end() -> str:
    return "Round has ended!\n"


def leaderboard_header() -> str:
    return (
        "Leader board is as follows:\n"
        "Ranking    Player Name     Level     Force HP    Coins\n"
    )


def leaderboard_entry(rank: int, player: _Ranked) -> str:
    level = str(player.level)
    if player.level < 10:
        level += " "
    return (
        f"{rank}          "
        f"{player.name.ljust(LEADERBOARD_NAME_WIDTH)}"
        f"{level}        "
        f"{str(player.force).ljust(LEADERBOARD_COLUMN_WIDTH)}"
        f"{str(player.health_points).ljust(LEADERBOARD_COLUMN_WIDTH)}"
        f"{player.coins}\n"
    )


def barrier() -> str:
    return "\n" + "-" * 40 + "\n\n"


def game_over() -> str:
    return "Game is over!\n"


def winner(player: _Ranked) -> str:
    return f"The winner is: {player.name}\nCongratulations!\n\n"


def no_winners() -> str:
    return "There are no winners in this game.\nBetter luck next time!\n"


def encounter_won_message(player: _Ranked, loot: int) -> str:
    return f"{player.name} won the encounter, gained {loot} coins and leveled up!"


def encounter_lost_message(player: _Ranked, damage: int) -> str:
    return f"{player.name} lost the encounter and took {damage} damage!"


def potions_purchase_message(player: _Ranked, amount: int) -> str:
    return f"{player.name} bought {amount} potions!"


def solar_eclipse_message(player: _Ranked, effect: int) -> str:
    return (
        f"{player.name} was affected by a solar eclipse! "
        f"their force has changed by {effect}!"
    )