import tempfile
import unittest
from itertools import count
from pathlib import Path
from unittest.mock import patch

from spider.CommandLine import CommandLineInterface, configFromArgs, main, parseArgs
from spider.Core import Card, GameConfig, Suit
from spider.Game import DEAL_NEEDS_CARDS_MESSAGE, GameController, GameState


_ids = count(1000)


def up(suit, rank):
    return Card(next(_ids), suit, rank, True)


def down(suit, rank):
    return Card(next(_ids), suit, rank, False)


class CommandLineTestCase(unittest.TestCase):
    def make_cli(self, tableau=None, stock=(), foundations=0):
        lines = []
        ui = CommandLineInterface(output=lines.append)
        config = GameConfig()
        config.seed = 1
        controller = GameController(ui, config)
        if tableau is None:
            controller.newGame()
        else:
            tableau = list(tableau) + [()] * (10 - len(tableau))
            controller.state = GameState(tableau=tuple(tableau), stock=tuple(stock), foundations=foundations)
        return ui, controller, lines

    def test_new_game_prints_board(self):
        ui, controller, lines = self.make_cli()
        self.assertEqual("Game started!", lines[0])
        self.assertTrue(lines[1].startswith("Score: 500"))
        self.assertTrue(any(line.startswith(" 5: ") for line in lines))

    def test_mv_moves_top_card_or_sequence(self):
        ui, controller, lines = self.make_cli([(up(Suit.SPADES, "5"),), (up(Suit.SPADES, "6"),)])
        self.assertTrue(ui.handleCommand("mv 0 1"))
        self.assertEqual(2, len(controller.state.tableau[1]))
        self.assertTrue(ui.handleCommand("mv 1 0 4"))
        self.assertEqual(2, len(controller.state.tableau[4]))

    def test_mv_refused_prints_message(self):
        ui, controller, lines = self.make_cli([(up(Suit.HEARTS, "5"),), (up(Suit.SPADES, "9"),)])
        ui.handleCommand("mv 0 1")
        self.assertEqual("Cannot move!", lines[-1])
        ui.handleCommand("mv x 1")
        self.assertEqual("Invalid index!", lines[-1])

    def test_sel_and_to(self):
        ui, controller, lines = self.make_cli([(up(Suit.HEARTS, "5"),), (up(Suit.SPADES, "6"),)])
        ui.handleCommand("to 1")
        self.assertEqual("Nothing selected!", lines[-1])
        ui.handleCommand("sel 0 0")
        self.assertIsNotNone(controller.selection)
        self.assertTrue(any("♥5 *" in line for line in lines))
        ui.handleCommand("to 1")
        self.assertEqual(2, len(controller.state.tableau[1]))
        ui.handleCommand("sel 0 0")
        self.assertEqual("Cannot select that sequence!", lines[-1])

    def test_sel_after_win_is_refused(self):
        ui, controller, lines = self.make_cli([(up(Suit.SPADES, "5"),)], foundations=8)
        ui.handleCommand("sel 0 0")
        self.assertIsNone(controller.selection)
        self.assertEqual("Cannot select that sequence!", lines[-1])

    def test_deal_messages(self):
        ui, controller, lines = self.make_cli([(up(Suit.HEARTS, "5"),)], stock=[down(Suit.SPADES, "A")] * 10)
        ui.handleCommand("deal")
        self.assertEqual(DEAL_NEEDS_CARDS_MESSAGE, lines[-1])
        ui, controller, lines = self.make_cli([(up(Suit.HEARTS, "5"),)])
        ui.handleCommand("deal")
        self.assertEqual("No card left!", lines[-1])

    def test_new_quit_and_unknown(self):
        ui, controller, lines = self.make_cli()
        self.assertTrue(ui.handleCommand("new 4"))
        self.assertEqual(4, controller.state.difficulty)
        ui.handleCommand("new 3")
        self.assertEqual("Difficulty must be 1, 2 or 4!", lines[-1])
        ui.handleCommand("dance")
        self.assertEqual("Invalid command!", lines[-1])
        self.assertTrue(ui.handleCommand(""))
        self.assertFalse(ui.handleCommand("quit"))

    def test_parse_args(self):
        args = parseArgs(["--difficulty", "2", "--seed", "7"])
        self.assertEqual((2, 7, "WARNING"), (args.difficulty, args.seed, args.log_level))
        with self.assertRaises(SystemExit):
            parseArgs(["--difficulty", "3"])

    def test_config_file_is_read_and_overridden(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.ini"
            path.write_text("difficulty=2\nseed=11\n", encoding="utf-8")
            config = configFromArgs(parseArgs(["--config", str(path)]))
            self.assertEqual((2, 11), (config.difficulty, config.seed))
            config = configFromArgs(parseArgs(["--config", str(path), "--difficulty", "4"]))
            self.assertEqual((4, 11), (config.difficulty, config.seed))
        config = configFromArgs(parseArgs([]))
        self.assertEqual((1, None), (config.difficulty, config.seed))

    def test_main_writes_config_back_on_quit(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.ini"
            with patch("builtins.input", side_effect=["new 4", "quit"]), patch("builtins.print"):
                main(["--config", str(path), "--seed", "3"])
            loaded = GameConfig.loadFromFile(path)
        self.assertEqual((4, 3), (loaded.difficulty, loaded.seed))


if __name__ == "__main__":
    unittest.main()
