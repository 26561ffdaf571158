"""Tests for the round/match state machine."""

import pytest

from conftest import ScriptedSelector, fill
from tictactoe.match import MatchController, Phase
from tictactoe.players import HumanInput, PlayerRecord

# Human opens with 1, 2, 4; the computer answers 5, blocks at 3, then wins on 3-5-7.
LOSING_ROUND = ["1", "2", "4"]


def test_first_mover_choice(make_controller, port):
    controller = make_controller(inputs=["3", "2"])
    assert controller.setup_first_move() == "O"
    assert controller.current_marker == "O"
    assert "Sorry, please input either '1' or '2'" in port.output


@pytest.mark.parametrize("policy, expected", [("human", "X"), ("computer", "O")])
def test_fixed_first_mover(make_controller, port, policy, expected):
    controller = make_controller(first_mover=policy)
    assert controller.setup_first_move() == expected
    assert port.inputs == []


def test_turns_alternate(make_controller):
    controller = make_controller(inputs=["1"], first_mover="human")
    controller.setup_first_move()
    controller.reset_round()
    assert controller.play_turn() == 1
    assert controller.current_marker == "O"
    assert controller.play_turn() == 5
    assert controller.current_marker == "X"


def test_computer_wins_round(make_controller):
    controller = make_controller(inputs=LOSING_ROUND, first_mover="human")
    controller.setup_first_move()
    assert controller.play_round() == "O"
    assert controller.phase is Phase.ROUND_RESOLVED
    assert controller.computer.record.score == 1
    assert controller.human.record.score == 0
    assert "Sonny won!" in controller.port.output
    assert "First to 2 is the ultimate winner!" in controller.port.output


def test_tie_changes_no_score(make_controller):
    controller = make_controller(first_mover="human")
    fill(controller.board, "XOXXOOOXX")
    assert controller.round_over()
    assert controller.resolve_round() is None
    assert controller.human.record.score == 0
    assert controller.computer.record.score == 0


def test_human_wins_round(port, computer):
    human = ScriptedSelector(
        record=PlayerRecord(name="Ana", marker="X"), squares=[1, 2, 3]
    )
    opponent = ScriptedSelector(record=computer.record, squares=[4, 5])
    controller = MatchController(human=human, computer=opponent, port=port)
    controller.first_marker = "X"
    assert controller.play_round() == "X"
    assert human.record.score == 1
    assert "Ana won!" in port.output


def test_match_ends_at_threshold_without_asking(make_controller, port):
    controller = make_controller(
        inputs=LOSING_ROUND + ["y"] + LOSING_ROUND, first_mover="human"
    )
    winner = controller.play_match()

    assert winner is controller.computer.record
    assert controller.phase is Phase.MATCH_OVER
    assert controller.computer.record.score == 2
    assert port.inputs == []
    assert port.output.count("Would you like to play another round? (y/n)") == 1
    assert "Sonny is the ULTIMATE WINNER" in port.output
    assert "Better luck next time!" in port.output


def test_declining_ends_match_without_winner(make_controller):
    controller = make_controller(inputs=LOSING_ROUND + ["n"], first_mover="human")
    assert controller.play_match() is None
    assert controller.phase is Phase.MATCH_OVER
    assert controller.computer.record.score == 1
    assert controller.ultimate_winner() is None


def test_threshold_is_configurable(make_controller):
    controller = make_controller(inputs=LOSING_ROUND, first_mover="human", max_wins=1)
    assert controller.play_match() is controller.computer.record


def test_reset_match_clears_scores_and_first_mover(make_controller):
    controller = make_controller(inputs=LOSING_ROUND + ["n"], first_mover="human")
    controller.play_match()
    controller.reset_match()
    assert controller.human.record.score == 0
    assert controller.computer.record.score == 0
    assert controller.board.unmarked_positions() == list(range(1, 10))
    assert controller.first_marker is None
    assert controller.phase is Phase.CHOOSING_FIRST_MOVER


def test_restart_asks_first_mover_again(make_controller, port):
    controller = make_controller(inputs=["1"] + LOSING_ROUND + ["n", "2"])
    controller.play_match()
    controller.reset_match()
    assert controller.setup_first_move() == "O"
    assert port.output.count("Would you like to go first or second?") == 2


def test_round_reset_keeps_first_mover(make_controller):
    controller = make_controller(first_mover="computer")
    controller.setup_first_move()
    controller.reset_round()
    controller.play_turn()
    controller.reset_round()
    assert controller.current_marker == "O"
    assert controller.board.unmarked_positions() == list(range(1, 10))


def test_turn_on_full_board_is_refused(make_controller):
    controller = make_controller(first_mover="human")
    controller.setup_first_move()
    fill(controller.board, "XOXXOOOXX")
    with pytest.raises(RuntimeError):
        controller.play_turn()


def test_turn_before_first_mover_is_refused(make_controller):
    controller = make_controller()
    with pytest.raises(RuntimeError):
        controller.play_turn()


def test_markers_must_differ(port, computer):
    human = HumanInput(record=PlayerRecord(name="Ana", marker="O"), port=port)
    with pytest.raises(ValueError):
        MatchController(human=human, computer=computer, port=port)
