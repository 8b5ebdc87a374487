"""Reading decks and players from their text files."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from string import ascii_letters, digits

from .cards import Card, Dragon, Encounter, Gang, Giant, Goblin, Monster, PotionsMerchant, SolarEclipse
from .players import Behavior, Job, Player, Responsible, RiskTaking, Sorcerer, Warrior

MIN_DECK_SIZE = 2
MIN_GANG_SIZE = 2
MIN_PLAYERS = 2
MAX_PLAYERS = 6
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 15


class InvalidCardsFile(ValueError):
    """The deck file is missing or malformed."""

    def __init__(self, message: str = "Invalid Cards File") -> None:
        super().__init__(message)


class InvalidPlayersFile(ValueError):
    """The players file is missing or malformed."""

    def __init__(self, message: str = "Invalid Players File") -> None:
        super().__init__(message)


_MONSTERS: dict[str, Callable[[], Monster]] = {
    "Goblin": Goblin,
    "Giant": Giant,
    "Dragon": Dragon,
}
_EVENTS: dict[str, Callable[[], Card]] = {
    "SolarEclipse": SolarEclipse,
    "PotionsMerchant": PotionsMerchant,
}
_JOBS: dict[str, Callable[[], Job]] = {"Warrior": Warrior, "Sorcerer": Sorcerer}
_BEHAVIORS: dict[str, Callable[[], Behavior]] = {
    "Responsible": Responsible,
    "RiskTaking": RiskTaking,
}


def _gang_size(token: str | None) -> int:
    if not token or any(c not in digits for c in token):
        raise InvalidCardsFile()
    try:
        size = int(token)
    except ValueError:
        raise InvalidCardsFile() from None
    if size < MIN_GANG_SIZE:
        raise InvalidCardsFile()
    return size


def _read_gang(tokens: Iterator[str]) -> Gang:
    gang = Gang()
    for _ in range(_gang_size(next(tokens, None))):
        token = next(tokens, None)
        if token == "Gang":
            gang.add_monster(_read_gang(tokens))
        elif token in _MONSTERS:
            gang.add_monster(_MONSTERS[token]())
        else:
            raise InvalidCardsFile()
    return gang


def parse_deck(text: str) -> list[Card]:
    """Build a deck from whitespace-separated card names."""
    tokens = iter(text.split())
    deck: list[Card] = []
    for token in tokens:
        if token == "Gang":
            deck.append(Encounter(_read_gang(tokens)))
        elif token in _MONSTERS:
            deck.append(Encounter(_MONSTERS[token]()))
        elif token in _EVENTS:
            deck.append(_EVENTS[token]())
        else:
            raise InvalidCardsFile()
    if len(deck) < MIN_DECK_SIZE:
        raise InvalidCardsFile()
    return deck


def _is_name_valid(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH and all(
        c in ascii_letters for c in name
    )


def parse_players(text: str) -> list[Player]:
    """Build players from lines of 'name job behavior'."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    players: list[Player] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 3:
            raise InvalidPlayersFile()
        name, job, behavior = fields[:3]
        if not _is_name_valid(name) or behavior not in _BEHAVIORS or job not in _JOBS:
            raise InvalidPlayersFile()
        players.append(Player(name, _JOBS[job](), _BEHAVIORS[behavior]()))
    if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
        raise InvalidPlayersFile()
    return players


def create_deck(deck_path: str) -> list[Card]:
    """Read and parse a deck file."""
    try:
        with open(deck_path, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError:
        raise InvalidCardsFile() from None
    return parse_deck(text)


def create_players(players_path: str) -> list[Player]:
    """Read and parse a players file."""
    try:
        with open(players_path, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError:
        raise InvalidPlayersFile() from None
    return parse_players(text)