import argparse
import logging

from spider.Core import DIFFICULTIES, GameConfig
from spider.Game import GameController
from spider.Interface import Interface

logger = logging.getLogger(__name__)

HELP = """commands:
  sel C I     select the sequence starting at card I of column C
  to C        drop the selection on column C
  mv C [I] D  move column C (from card I, default its top card) onto column D
  deal        deal one card onto every column
  new [D]     start a new game, optionally with D suits (1, 2 or 4)
  show        print the board
  quit        leave the game"""


class CommandLineInterface(Interface):

    def __init__(self, output=print):
        super().__init__()
        self.output = output

    def printAll(self):
        state = self.controller.state
        out = self.output
        out(f"Score: {state.score}    Moves: {state.moves}    "
            f"Finished: {state.foundations}/8    Stock: {len(state.stock)}")
        out("----0----1----2----3----4----5----6----7----8----9---")
        i = 0
        while True:
            has = False
            line = str(i).rjust(2) + ": "
            for c, stack in enumerate(state.tableau):
                if len(stack) <= i:
                    line += "     "
                    continue
                has = True
                mark = "*" if self.controller.isSelected(c, i) else " "
                line += stack[i].gameStr() + mark + " "
            if not has:
                break
            out(line)
            i += 1
        out("")

    def onStart(self):
        self.output("Game started!")
        self.notifyRedraw()

    def notifyRedraw(self):
        self.printAll()

    def onMessage(self, message: str):
        self.output(message)

    def onWin(self):
        state = self.controller.state
        self.output(f"You win! {state.moves} moves, final score {state.score}.")

    def handleCommand(self, command: str) -> bool:
        """
        Runs one line of player input.
        :return: False when the player wants to leave
        """
        controller = self.controller
        args = command.split()
        if len(args) == 0:
            return True
        name = args[0]
        try:
            if name == "sel":
                column, index = int(args[1]), int(args[2])
                if controller.trySelect(column, index):
                    self.notifyRedraw()
                else:
                    self.output("Cannot select that sequence!")
            elif name == "to":
                if controller.selection is None:
                    self.output("Nothing selected!")
                elif not controller.clickColumn(int(args[1])):
                    self.output("Cannot move!")
            elif name == "mv":
                src = int(args[1])
                if len(args) > 3:
                    index, dest = int(args[2]), int(args[3])
                else:
                    index, dest = len(controller.state.tableau[src]) - 1, int(args[2])
                if not controller.moveSequence(src, index, dest):
                    self.output("Cannot move!")
            elif name == "deal":
                if len(controller.state.stock) == 0:
                    self.output("No card left!")
                else:
                    controller.deal()
            elif name == "new":
                difficulty = int(args[1]) if len(args) > 1 else None
                if difficulty is not None and difficulty not in DIFFICULTIES:
                    self.output("Difficulty must be 1, 2 or 4!")
                else:
                    controller.newGame(difficulty)
            elif name == "show":
                self.notifyRedraw()
            elif name in ("quit", "exit", "q"):
                return False
            elif name == "help":
                self.output(HELP)
            else:
                self.output("Invalid command!")
        except (IndexError, ValueError):
            self.output("Invalid index!")
        return True


def parseArgs(argv=None):
    parser = argparse.ArgumentParser(description="Spider solitaire in the terminal.")
    parser.add_argument("--config", default=None, metavar="PATH",
                        help="key=value game config, read at start and written back on exit")
    parser.add_argument("--difficulty", type=int, choices=DIFFICULTIES, default=None,
                        help="number of suits in the deck")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible deal")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def configFromArgs(args) -> GameConfig:
    """Options given on the command line win over the config file."""
    config = GameConfig.loadFromFile(args.config) if args.config else GameConfig()
    if args.difficulty is not None:
        config.difficulty = args.difficulty
    if args.seed is not None:
        config.seed = args.seed
    return config


def main(argv=None):
    args = parseArgs(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    config = configFromArgs(args)

    interface = CommandLineInterface()
    controller = GameController(interface, config)
    controller.newGame()
    interface.output(HELP)
    while True:
        try:
            command = input("> ")
        except EOFError:
            break
        if not interface.handleCommand(command):
            break
        if controller.gameEnded:
            interface.output("Type 'new' to play again or 'quit' to leave.")
    if args.config:
        try:
            config.saveToFile(args.config)
        except OSError as e:
            logger.warning("could not save config to %s: %s", args.config, e)


if __name__ == '__main__':
    main()
