import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional


class Suit(str, Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def color(self):
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return "red"
        return "black"


SUIT_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
RANK_VALUES = {rank: i + 1 for i, rank in enumerate(RANKS)}

NUM_PER_SUIT = len(RANKS)
DECK_SIZE = 104
STACK_COUNT = 10
FULL_SETS = DECK_SIZE // NUM_PER_SUIT
DIFFICULTIES = (1, 2, 4)
# columns 0-3 get 6 cards, the rest 5
INITIAL_COLUMN_SIZES = (6, 6, 6, 6, 5, 5, 5, 5, 5, 5)


@dataclass(frozen=True)
class Card:
    id: int
    suit: Suit
    rank: str
    faceUp: bool = False

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    def turnedUp(self) -> "Card":
        if self.faceUp:
            return self
        return replace(self, faceUp=True)

    def gameStr(self):
        if not self.faceUp:
            return "---"
        return f"{self.suit.value}{self.rank:<2}"

    def __str__(self):
        return self.gameStr()


class Deal(NamedTuple):
    tableau: tuple
    remainingStock: tuple


class SetCheck(NamedTuple):
    newColumn: tuple
    removed: bool


def createDeck(difficulty: int, rng: Optional[random.Random] = None) -> list:
    """
    Builds the 104 card deck for the given number of suits and shuffles it.

    :param difficulty: number of distinct suits in play, one of 1, 2 or 4
    :param rng: source of randomness, the module level generator when omitted
    :return: the shuffled cards, all face-down
    """
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"unsupported difficulty: {difficulty!r}")
    copies = FULL_SETS // difficulty
    deck = []
    for suit in SUIT_ORDER[:difficulty]:
        for _ in range(copies):
            for rank in RANKS:
                deck.append(Card(len(deck), suit, rank))
    (rng if rng is not None else random).shuffle(deck)
    return deck


def dealInitial(deck) -> Deal:
    """
    Deals the opening tableau from the front of the deck.
    The rest of the deck becomes the stock, drawn from its end.
    """
    tableau = []
    pos = 0
    for size in INITIAL_COLUMN_SIZES:
        tableau.append(exposeTop(tuple(deck[pos:pos + size])))
        pos += size
    return Deal(tuple(tableau), tuple(deck[pos:]))


def canMoveSequence(cards) -> bool:
    if len(cards) == 0:
        return False
    base = cards[0]
    if not base.faceUp:
        return False
    for upper in cards[1:]:
        if not upper.faceUp:
            return False
        if upper.suit != base.suit or upper.value != base.value - 1:
            return False
        base = upper
    return True


def isValidMove(movingCards, destination: Optional[Card]) -> bool:
    """
    Whether `movingCards` may be placed on top of `destination`.
    Only ranks are compared, any suit may sit on any other suit.
    An absent destination is never valid here, empty columns are the caller's concern.
    """
    if destination is None or len(movingCards) == 0:
        return False
    return movingCards[0].value == destination.value - 1


def exposeTop(column) -> tuple:
    column = tuple(column)
    if len(column) == 0 or column[-1].faceUp:
        return column
    return column[:-1] + (column[-1].turnedUp(),)


def splitColumn(column, index: int):
    """
    :return: (remaining, moving), the top of remaining turned face-up
    """
    column = tuple(column)
    return exposeTop(column[:index]), column[index:]


def topOf(column) -> Optional[Card]:
    if len(column) == 0:
        return None
    return column[-1]


def isCompleteSet(cards) -> bool:
    if len(cards) != NUM_PER_SUIT:
        return False
    suit = cards[0].suit
    for i, card in enumerate(cards):
        if not card.faceUp or card.suit != suit or card.value != NUM_PER_SUIT - i:
            return False
    return True


def checkAndRemoveCompleteSet(column) -> SetCheck:
    column = tuple(column)
    if len(column) < NUM_PER_SUIT:
        return SetCheck(column, False)
    tail = column[-NUM_PER_SUIT:]
    if not isCompleteSet(tail):
        return SetCheck(column, False)
    return SetCheck(exposeTop(column[:-NUM_PER_SUIT]), True)


class GameConfig:
    def __init__(self):
        self.difficulty = 1
        self.seed = None

    def makeRandom(self) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed)

    @staticmethod
    def loadFromFile(path):
        config = GameConfig()
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except OSError:
            return config
        for line in lines:
            line = line.strip()
            if len(line) == 0 or line.startswith("#") or "=" not in line:
                continue
            (k, v) = line.split("=", 1)
            k = k.strip()
            v = v.strip()
            if k not in config.__dict__:
                continue
            if v == "None":
                v = None
            else:
                try:
                    v = int(v)
                except ValueError:
                    continue
            config.__setattr__(k, v)
        if config.difficulty not in DIFFICULTIES:
            config.difficulty = 1
        return config

    def saveToFile(self, path):
        with open(path, "w", encoding="utf-8") as f:
            for k, v in self.__dict__.items():
                f.write(f"{k}={str(v)}\n")
