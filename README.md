# mtmchkin

A console card game for 2 to 6 players. Players take turns in the order they
are listed. On each turn the next card of the deck is drawn (the deck wraps
around when it runs out) and applied to the current player. Monsters are
fought, potions are bought and solar eclipses change a player's force. Players
who are knocked out (0 HP) skip their turns. The game ends when a player
reaches level 10 or when every player is knocked out.

## Running a game

```
mtmchkin <deck_file_path> <players_file_path>
```

The same entry point can be run as `python -m mtmchkin.game <deck> <players>`.

The whole game is printed to standard output: the list of players, every turn
with its card and outcome, and a leaderboard after each round. At the end the
winner is announced, or a "no winners" message is printed if the leading player
has not reached level 10.

If either file cannot be read or is malformed, `Invalid Cards File` or
`Invalid Players File` is printed instead of a game and the exit status is 0.
With the wrong number of arguments a usage message is printed; with fewer than
two arguments the command then exits with status 1, and with more than two it
goes on using the first two.

### Deck file

The deck file is a list of card names separated by whitespace:

- `Goblin`: power 5, loot 2, damage 10
- `Giant`: power 12, loot 5, damage 25
- `Dragon`: power 17, loot 100, damage 9001
- `SolarEclipse`: Warriors lose 1 force (not below 0), Sorcerers gain 1
- `PotionsMerchant`: the player buys potions that heal 10 HP for 5 coins each,
  according to their behavior
- `Gang N m1 ... mN`: a gang of `N` (at least 2) monsters whose power, loot and
  damage are summed. Members may themselves be gangs. A gang counts as one card.

A deck must hold at least 2 cards.

```
Goblin Gang 2 Giant Dragon SolarEclipse PotionsMerchant
```

### Players file

The players file holds one player per line in the form `name job behavior`
(any further words on a line are ignored; an empty line in the middle of the
file makes it invalid):

- name: 3 to 15 English letters
- job: `Warrior` (combat power is 2 × force + level) or `Sorcerer`
  (combat power is force + level)
- behavior: `Responsible` (buys as many potions as are useful and affordable)
  or `RiskTaking` (buys one potion, only when below 50 HP)

```
Alice Warrior Responsible
Bob Sorcerer RiskTaking
```

Every player starts at level 1 with 5 force, 100 HP and 10 coins. Beating a
monster (combat power strictly greater than the monster's) raises the level by
one, up to 10, and adds the monster's loot; losing costs its damage in HP.

The leaderboard is ordered by level (highest first), then coins (most first),
then name.

## Using it as a library

```python
import io
from mtmchkin.game import Mtmchkin

out = io.StringIO()
game = Mtmchkin("deck.txt", "players.txt", out=out)
game.play()
print(out.getvalue())
```

Without `out`, `Mtmchkin` writes to standard output. `play_round()` and
`is_game_over()` allow driving the game one round at a time.

The modules are:

- `mtmchkin.players`: `Player`, the jobs `Warrior` and `Sorcerer`, and the
  behaviors `Responsible` and `RiskTaking`.
- `mtmchkin.cards`: the monsters `Goblin`, `Giant`, `Dragon` and `Gang`, and the
  cards `Encounter`, `PotionsMerchant` and `SolarEclipse`.
- `mtmchkin.factory`: `parse_deck` and `parse_players` build a deck or a player
  list from text; `create_deck` and `create_players` do the same from a file.
  They raise `InvalidCardsFile` or `InvalidPlayersFile` (both `ValueError`
  subclasses) on bad input.
- `mtmchkin.messages`: functions returning every piece of text the game prints.
- `mtmchkin.game`: `Mtmchkin` and the command-line `main`.

## Tests

```
pip install -e .[test]
pytest
```