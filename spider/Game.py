import logging
from dataclasses import dataclass, replace
from typing import Optional

from spider.Core import (
    FULL_SETS,
    GameConfig,
    NUM_PER_SUIT,
    Suit,
    canMoveSequence,
    checkAndRemoveCompleteSet,
    createDeck,
    dealInitial,
    isValidMove,
    splitColumn,
    topOf,
)

logger = logging.getLogger(__name__)

INITIAL_SCORE = 500
SET_BONUS = 100
MOVE_COST = 1
DEAL_NEEDS_CARDS_MESSAGE = "All columns must have at least one card before dealing from the stock."


@dataclass(frozen=True)
class GameState:
    tableau: tuple
    stock: tuple
    difficulty: int = 1
    foundations: int = 0
    moves: int = 0
    score: int = INITIAL_SCORE

    @property
    def isWon(self) -> bool:
        return self.foundations == FULL_SETS

    def cardCount(self) -> int:
        return sum(len(col) for col in self.tableau) + len(self.stock) + self.foundations * NUM_PER_SUIT

    def hasEmptyColumn(self) -> bool:
        return any(len(col) == 0 for col in self.tableau)


@dataclass(frozen=True)
class Selection:
    column: int
    index: int


class GameEvent:
    pass


@dataclass(frozen=True)
class CardMove(GameEvent):
    src: tuple  # (column, index of the first moved card)
    dest: tuple  # (column, index the first card landed on)


@dataclass(frozen=True)
class CallDeal(GameEvent):
    drawCount: int


@dataclass(frozen=True)
class FreeStack(GameEvent):
    idx: int
    suit: Suit


@dataclass(frozen=True)
class RevealTop(GameEvent):
    idx: int


def newGameState(difficulty: int, rng=None) -> GameState:
    tableau, stock = dealInitial(createDeck(difficulty, rng))
    return GameState(tableau=tableau, stock=stock, difficulty=difficulty)


def applyMove(state: GameState, src: int, index: int, dest: int):
    """
    Moves `state.tableau[src][index:]` onto column `dest` without checking legality,
    then removes completed sets from every column.

    :return: (the new state, list of events describing what happened)
    """
    tableau = list(state.tableau)
    remaining, moving = splitColumn(tableau[src], index)
    destIndex = len(tableau[dest])
    events = [CardMove((src, index), (dest, destIndex))]
    if len(remaining) > 0 and not state.tableau[src][index - 1].faceUp:
        events.append(RevealTop(src))
    tableau[src] = remaining
    tableau[dest] = tableau[dest] + moving

    removed = 0
    for i, column in enumerate(tableau):
        newColumn, done = checkAndRemoveCompleteSet(column)
        if not done:
            continue
        removed += 1
        events.append(FreeStack(i, column[-1].suit))
        if len(newColumn) > 0 and not column[len(newColumn) - 1].faceUp:
            events.append(RevealTop(i))
        tableau[i] = newColumn

    newState = replace(
        state,
        tableau=tuple(tableau),
        foundations=state.foundations + removed,
        moves=state.moves + 1,
        score=state.score + removed * SET_BONUS - MOVE_COST,
    )
    return newState, events


def applyDeal(state: GameState):
    """
    Deals one face-up card from the stock onto every column.
    The caller checks the stock and empty column preconditions.
    """
    stock = list(state.stock)
    tableau = list(state.tableau)
    count = 0
    for i in range(len(tableau)):
        if len(stock) == 0:
            break
        tableau[i] = tableau[i] + (stock.pop().turnedUp(),)
        count += 1
    newState = replace(state, tableau=tuple(tableau), stock=tuple(stock), moves=state.moves + 1)
    return newState, CallDeal(count)


class GameController:
    """
    Owns the current GameState and the player's selection.
    click*** : interpret player input.
    Every change replaces `state` with a new GameState and is reported to the interface.
    """

    def __init__(self, interface=None, config: GameConfig = None):
        self.interface = interface
        if interface is not None:
            interface.controller = self
        self.config = config if config is not None else GameConfig()
        self.rng = self.config.makeRandom()
        self.state: Optional[GameState] = None
        self.selection: Optional[Selection] = None

    def newGame(self, difficulty: int = None) -> GameState:
        if difficulty is not None:
            self.config.difficulty = difficulty
        self.state = newGameState(self.config.difficulty, self.rng)
        self.selection = None
        logger.debug("new game with %d suit(s)", self.config.difficulty)
        if self.interface is not None:
            self.interface.onStart()
        return self.state

    def changeDifficulty(self, difficulty: int) -> GameState:
        return self.newGame(difficulty)

    @property
    def gameEnded(self) -> bool:
        return self.state is not None and self.state.isWon

    def selectedCards(self) -> tuple:
        if self.selection is None:
            return ()
        return self.state.tableau[self.selection.column][self.selection.index:]

    def isSelected(self, column: int, index: int) -> bool:
        s = self.selection
        return s is not None and s.column == column and index >= s.index

    def isValidPosition(self, column: int, index: int) -> bool:
        tableau = self.state.tableau
        return 0 <= column < len(tableau) and 0 <= index < len(tableau[column])

    def trySelect(self, column: int, index: int) -> bool:
        if self.state is None or self.gameEnded:
            return False
        if self.isValidPosition(column, index) and canMoveSequence(self.state.tableau[column][index:]):
            self.selection = Selection(column, index)
            return True
        self.selection = None
        return False

    def clickCard(self, column: int, index: int) -> bool:
        """
        Handles a click on the card at `index` of `column`.

        :return: whether a move was performed
        """
        if self.state is None or self.gameEnded or not 0 <= column < len(self.state.tableau):
            return False
        selection = self.selection
        if selection is None:
            if self.trySelect(column, index):
                self.notifyRedraw()
            return False
        if selection.column == column:
            self.selection = None
            self.notifyRedraw()
            return False

        moving = self.selectedCards()
        if isValidMove(moving, topOf(self.state.tableau[column])):
            self.performMove(selection.column, selection.index, column)
            return True
        self.trySelect(column, index)
        self.notifyRedraw()
        return False

    def clickEmptyColumn(self, column: int) -> bool:
        if self.state is None or self.gameEnded or self.selection is None:
            return False
        if len(self.state.tableau[column]) != 0:
            return False
        self.performMove(self.selection.column, self.selection.index, column)
        return True

    def clickColumn(self, column: int) -> bool:
        """A click on the column itself, below or outside its cards."""
        if self.state is None or not 0 <= column < len(self.state.tableau):
            return False
        cards = self.state.tableau[column]
        if len(cards) == 0:
            return self.clickEmptyColumn(column)
        return self.clickCard(column, len(cards) - 1)

    def moveSequence(self, src: int, index: int, dest: int) -> bool:
        state = self.state
        if state is None or self.gameEnded:
            return False
        if not self.isValidPosition(src, index) or not 0 <= dest < len(state.tableau) or src == dest:
            return False
        moving = state.tableau[src][index:]
        if not canMoveSequence(moving):
            return False
        target = topOf(state.tableau[dest])
        if target is not None and not isValidMove(moving, target):
            return False
        self.performMove(src, index, dest)
        return True

    def performMove(self, src: int, index: int, dest: int):
        before = self.state.foundations
        count = len(self.state.tableau[src]) - index
        self.state, events = applyMove(self.state, src, index, dest)
        self.selection = None
        logger.debug("moved %d card(s) from column %d to column %d", count, src, dest)
        if self.state.foundations > before:
            logger.debug("completed %d set(s), %d/%d done", self.state.foundations - before,
                         self.state.foundations, FULL_SETS)
        self.emit(events)
        if self.state.isWon:
            logger.info("game won in %d moves, score %d", self.state.moves, self.state.score)
            if self.interface is not None:
                self.interface.onWin()

    def deal(self) -> bool:
        state = self.state
        if state is None or self.gameEnded or len(state.stock) == 0:
            return False
        if state.hasEmptyColumn():
            logger.info("deal refused, a column is empty")
            if self.interface is not None:
                self.interface.onMessage(DEAL_NEEDS_CARDS_MESSAGE)
            return False
        self.state, event = applyDeal(state)
        self.selection = None
        logger.debug("dealt %d card(s), %d left in stock", event.drawCount, len(self.state.stock))
        self.emit([event])
        return True

    def emit(self, events):
        if self.interface is None:
            return
        for event in events:
            self.interface.onEvent(event)

    def notifyRedraw(self):
        if self.interface is not None:
            self.interface.notifyRedraw()
