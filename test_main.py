"""
Tests for the console front end.
"""

from main import TicTacToeConsole, build_parser, main


def scripted(*commands):
    """An input function that replays commands, then quits."""
    queue = list(commands)

    def read(prompt=""):
        if queue:
            return queue.pop(0)
        raise EOFError
    return read


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.vs_computer
    assert args.strategy == "minimax"
    assert args.delay == 0.5
    assert args.seed is None


def test_parser_options():
    args = build_parser().parse_args(
        ["--vs-computer", "--strategy", "heuristic", "--player1", "Ann", "--delay", "0", "--seed", "5"]
    )
    assert args.vs_computer
    assert args.strategy == "heuristic"
    assert args.player1 == "Ann"
    assert args.delay == 0.0
    assert args.seed == 5


def test_two_player_game_to_a_win(capsys):
    console = TicTacToeConsole("Ann", "Ben", input_func=scripted("1", "4", "2", "5", "3", "n"))
    console.start()

    assert console.game_state.winner.name == "Ann"
    out = capsys.readouterr().out
    assert "Ann wins!" in out
    assert "Winning line: 1, 2, 3" in out


def test_bad_commands_are_reported(capsys):
    console = TicTacToeConsole(input_func=scripted("hello", "1", "1", "0", "q"))
    console.start()

    out = capsys.readouterr().out
    assert "Unknown command: 'hello'" in out
    assert "Can't play there: cell already taken" in out
    assert "Can't play there: invalid cell" in out
    assert "Game quit by user." in out


def test_restart_clears_board():
    console = TicTacToeConsole(input_func=scripted("5", "r", "q"))
    console.start()
    assert console.game_state.moves == []


def test_computer_answers_human_move(capsys):
    console = TicTacToeConsole(
        "Ann", vs_computer=True, strategy="heuristic", delay=0, seed=1,
        input_func=scripted("1", "q")
    )
    console.start()

    board = console.game_state.board
    assert board.get_cell(0) == "X"
    assert board.get_cell(4) == "O"
    assert ">>> Computer plays 5" in capsys.readouterr().out


def test_main_runs_until_input_ends(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", scripted("5"))
    assert main(["--player1", "Ann"]) == 0
    assert "Goodbye!" in capsys.readouterr().out
