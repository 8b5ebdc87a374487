"""The game loop and its command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from . import messages
from .factory import InvalidCardsFile, InvalidPlayersFile, create_deck, create_players
from .players import MAX_LEVEL, Player


def _rank_key(player: Player) -> tuple[int, int, str]:
    return (-player.level, -player.coins, player.name)


class Mtmchkin:
    """A game built from a deck file and a players file."""

    def __init__(self, deck_path: str, players_path: str, out: TextIO | None = None) -> None:
        self.deck = create_deck(deck_path)
        self.players = create_players(players_path)
        self.leaderboard: list[Player] = list(self.players)
        self.turn_index = 1
        self._out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def play_turn(self, player: Player) -> None:
        """Draw the next card for the player and apply it."""
        card = self.deck[(self.turn_index - 1) % len(self.deck)]
        self._write(messages.turn_details(self.turn_index, player, card))
        self._write(messages.turn_outcome(card.apply(player)))
        self.turn_index += 1

    def play_round(self) -> None:
        """Give every player still standing one turn, then show the leaderboard."""
        self._write(messages.round_start())
        for player in self.players:
            if not player.is_knocked_out():
                self.play_turn(player)
        self._write(messages.round_end())
        self.leaderboard.sort(key=_rank_key)
        self._write(messages.leaderboard_header())
        for rank, player in enumerate(self.leaderboard, start=1):
            self._write(messages.leaderboard_entry(rank, player))
        self._write(messages.barrier())

    def is_game_over(self) -> bool:
        """Return whether someone reached the top level or everyone is knocked out."""
        if any(p.level == MAX_LEVEL for p in self.players):
            return True
        return all(p.is_knocked_out() for p in self.players)

    def play(self) -> None:
        """Play rounds until the game is over and announce the result."""
        self._write(messages.start_message())
        for index, player in enumerate(self.players, start=1):
            self._write(messages.start_player_entry(index, player))
        self._write(messages.barrier())
        self.leaderboard = list(self.players)
        while not self.is_game_over():
            self.play_round()
        self._write(messages.game_over())
        leader = self.leaderboard[0]
        if leader.level == MAX_LEVEL:
            self._write(messages.winner(leader))
        else:
            self._write(messages.no_winners())


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from a deck path and a players path."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Invalid number of arguments")
        print("Usage: mtmchkin <deck_file_path> <players_file_path>")
        if len(args) < 2:
            return 1
    deck_path, players_path = args[0], args[1]
    try:
        Mtmchkin(deck_path, players_path).play()
    except (InvalidCardsFile, InvalidPlayersFile) as error:
        print(error)
    return 0


if __name__ == "__main__":
    sys.exit(main())