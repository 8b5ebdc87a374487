import io

import pytest

from mtmchkin import messages
from mtmchkin.factory import InvalidCardsFile, InvalidPlayersFile
from mtmchkin.game import Mtmchkin, main
from mtmchkin.players import MAX_LEVEL

TWO_PLAYERS = "Alice Warrior Responsible\nBobby Sorcerer RiskTaking\n"


@pytest.fixture
def write_files(tmp_path):
    def write(deck_text, players_text):
        deck = tmp_path / "deck.txt"
        players = tmp_path / "players.txt"
        deck.write_text(deck_text)
        players.write_text(players_text)
        return str(deck), str(players)

    return write


def make_game(write_files, deck_text, players_text=TWO_PLAYERS):
    out = io.StringIO()
    return Mtmchkin(*write_files(deck_text, players_text), out=out), out


def test_invalid_files_raise(write_files):
    with pytest.raises(InvalidCardsFile):
        Mtmchkin(*write_files("Goblin", TWO_PLAYERS), out=io.StringIO())
    with pytest.raises(InvalidPlayersFile):
        Mtmchkin(*write_files("Goblin Goblin", "Alice Warrior Responsible\n"), out=io.StringIO())


def test_play_turn_cycles_through_deck(write_files):
    game, out = make_game(write_files, "Goblin Dragon")
    alice, bobby = game.players
    expected = messages.turn_details(1, alice, game.deck[0])
    expected += messages.turn_outcome(messages.encounter_won_message(alice, game.deck[0].monster.loot))
    game.play_turn(alice)
    assert out.getvalue() == expected

    out.seek(0)
    out.truncate()
    expected = messages.turn_details(2, bobby, game.deck[1])
    expected += messages.turn_outcome(messages.encounter_lost_message(bobby, game.deck[1].monster.damage))
    game.play_turn(bobby)
    assert out.getvalue() == expected
    assert bobby.is_knocked_out()


def test_round_leaderboard_order(write_files):
    game, out = make_game(write_files, "Dragon Goblin")
    game.play_round()
    alice, bobby = game.players
    assert game.leaderboard == [bobby, alice]
    text = out.getvalue()
    assert messages.leaderboard_entry(1, bobby) in text
    assert messages.leaderboard_entry(2, alice) in text
    assert text.startswith(messages.round_start())
    assert text.endswith(messages.barrier())


def test_knocked_out_players_skip_turns(write_files):
    game, out = make_game(write_files, "Dragon Dragon")
    game.play_round()
    assert game.is_game_over()
    out.seek(0)
    out.truncate()
    game.play_round()
    assert "Turn:" not in out.getvalue()


def test_game_not_over_at_start(write_files):
    game, _ = make_game(write_files, "Goblin Goblin")
    assert not game.is_game_over()
    game.players[0].level = MAX_LEVEL
    assert game.is_game_over()


def test_play_with_no_winners(write_files):
    game, out = make_game(write_files, "Dragon Dragon")
    game.play()
    text = out.getvalue()
    assert text.startswith(messages.start_message())
    assert messages.game_over() in text
    assert text.endswith(messages.no_winners())


def test_play_with_winner_breaks_ties_by_name(write_files):
    game, out = make_game(
        write_files, "Goblin Goblin", "Zelda Warrior Responsible\nAdam Warrior Responsible\n"
    )
    game.play()
    assert all(p.level == MAX_LEVEL for p in game.players)
    leader = game.leaderboard[0]
    assert leader.name == "Adam"
    assert out.getvalue().endswith(messages.winner(leader))


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Invalid number of arguments" in capsys.readouterr().out


def test_main_reports_invalid_file(tmp_path, capsys):
    players = tmp_path / "players.txt"
    players.write_text(TWO_PLAYERS)
    main([str(tmp_path / "missing.txt"), str(players)])
    assert capsys.readouterr().out == "Invalid Cards File\n"


def test_main_plays_game(write_files, capsys):
    assert main(list(write_files("Dragon Dragon", TWO_PLAYERS))) == 0
    assert capsys.readouterr().out.endswith(messages.no_winners())