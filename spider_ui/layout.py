from spider_ui.ui_config import (
    CARD_HEIGHT_MULTIPLIER,
    CARD_HEIGHT_PERCENT,
    CARD_WIDTH_PERCENT,
    SHOWING_HEIGHT_PERCENT,
    TOP_MARGIN,
)
from spider_ui.view_model import GameViewModel


class Rect:

    def __init__(self, upperLeft, width=50, height=80):
        self.upperLeft = upperLeft
        self.width = width
        self.height = height

    def contains(self, x, y):
        (tx, ty) = self.upperLeft
        return tx <= x <= tx + self.width and ty <= y <= ty + self.height

    def __repr__(self):
        return f"Rect({self.upperLeft}, {self.width}, {self.height})"


def computeCardSize(width, height):
    cardWidth = width * CARD_WIDTH_PERCENT
    cardHeight = height * CARD_HEIGHT_PERCENT
    if cardHeight >= cardWidth * CARD_HEIGHT_MULTIPLIER:
        cardHeight = cardWidth * CARD_HEIGHT_MULTIPLIER
    else:
        cardWidth = cardHeight / CARD_HEIGHT_MULTIPLIER
    return cardWidth, cardHeight


class BoardLayout:
    """
    Where every column slot, card and the stock sit on a board of the given size.
    Cards are fanned downwards and squeezed when a column would run off the bottom.
    """

    def __init__(self, vm: GameViewModel, width, height):
        self.width = width
        self.height = height
        self.cardWidth, self.cardHeight = computeCardSize(width, height)
        cardWidth = self.cardWidth
        cardHeight = self.cardHeight

        stackCount = len(vm.stacks)
        xMargin = (width - stackCount * cardWidth) / (stackCount + 1)
        mainHeight = height - TOP_MARGIN - cardHeight - 20
        self.stackRects = []
        self.cardRects = []
        x = xMargin
        for stack in vm.stacks:
            self.stackRects.append(Rect((x, TOP_MARGIN), cardWidth, cardHeight))
            dy = self.computeDeltaY(len(stack.cards), mainHeight)
            y = TOP_MARGIN
            rects = []
            for _ in stack.cards:
                rects.append(Rect((x, y), cardWidth, cardHeight))
                y += dy
            self.cardRects.append(rects)
            x += cardWidth + xMargin

        self.stockRect = Rect((xMargin, height - cardHeight - 10), cardWidth, cardHeight)

    def computeDeltaY(self, stackSize, height):
        showing = self.cardHeight * SHOWING_HEIGHT_PERCENT
        if stackSize < 2:
            return 0
        return min(showing, (height - self.cardHeight) / (stackSize - 1))

    def hitCard(self, x, y):
        """
        :return: (column, card index) of the topmost card under the point, or None
        """
        for i, rects in enumerate(self.cardRects):
            for j in range(len(rects) - 1, -1, -1):
                if rects[j].contains(x, y):
                    return (i, j)
        return None

    def hitColumn(self, x, y):
        for i, rect in enumerate(self.stackRects):
            (rx, ry) = rect.upperLeft
            if rx <= x <= rx + rect.width and y >= ry:
                return i
        return None

    def hitStock(self, x, y):
        return self.stockRect.contains(x, y)
