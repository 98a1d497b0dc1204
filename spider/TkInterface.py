import logging
from tkinter import *

from spider.Core import GameConfig
from spider.Game import GameController
from spider.Interface import Interface
from spider_ui.adapter import ControllerAdapter
from spider_ui.layout import BoardLayout
from spider_ui.settings_store import load_settings, save_settings
from spider_ui.ui_config import (
    CARD_FONT_PERCENT,
    DIFFICULTY_LABELS,
    DIFFICULTY_ORDER,
    GAME,
    MENU,
    THEME,
)

logger = logging.getLogger(__name__)

DIFFICULTY_KEYS = {str(d): d for d in DIFFICULTY_ORDER}


class TkInterface(Interface):

    def __init__(self, settings=None):
        super().__init__()
        self.settings = settings if settings is not None else load_settings()
        self.width = int(self.settings["width"])
        self.height = int(self.settings["height"])
        self.canvas: Canvas = None
        self.root = None
        self.stage = MENU
        self.vm = None
        self.layout = None
        self.message = None
        self.status = None
        self.highlighted = set()

        config = GameConfig()
        config.difficulty = int(self.settings["difficulty"])
        GameController(self, config)

    def run(self):
        root = Tk()
        root.title("Spider Solitaire")
        self.root = root
        root.resizable(width=True, height=True)
        canvas = Canvas(root, width=self.width, height=self.height)
        canvas.configure(bd=0, highlightthickness=0)
        canvas.pack(expand=1, fill="both")
        self.canvas = canvas
        root.bind("<Button-1>", self.mousePressed)
        root.bind("<Key>", self.keyPressed)
        root.bind("<Configure>", self.resize)
        root.protocol("WM_DELETE_WINDOW", self.onClosing)
        self.redrawAll()
        root.mainloop()

    def onClosing(self):
        self.settings["difficulty"] = str(self.controller.config.difficulty)
        self.settings["width"] = str(self.width)
        self.settings["height"] = str(self.height)
        try:
            save_settings(self.settings)
        except OSError as e:
            logger.warning("could not save settings: %s", e)
        self.root.destroy()

    def resize(self, event):
        if event.widget != self.root:
            return
        self.width = event.width
        self.height = event.height
        self.updateLayout()
        self.redrawAll()

    def startGame(self, difficulty=None):
        self.stage = GAME
        self.clearNotes()
        self.controller.newGame(difficulty)

    def updateLayout(self):
        if self.stage != GAME or self.controller.state is None:
            return
        self.vm = ControllerAdapter.snapshot(self.controller)
        self.layout = BoardLayout(self.vm, self.width, self.height)

    def redrawAll(self):
        if self.canvas is None:
            return
        canvas = self.canvas
        canvas.delete(ALL)
        canvas.create_rectangle(0, 0, self.width, self.height, fill=THEME["felt"], width=0)
        if self.stage == GAME:
            self.gameStageRedrawAll()
        elif self.stage == MENU:
            self.menuStageRedrawAll()
        canvas.update()

    def menuStageRedrawAll(self):
        canvas = self.canvas
        canvas.create_text(self.width / 2, 60, text="Spider Solitaire", font="Arial 30",
                           fill=THEME["hud_text"], anchor=N)
        current = self.controller.config.difficulty
        texts = [f"New Game ({DIFFICULTY_LABELS[current]}):(n)"]
        for d in DIFFICULTY_ORDER:
            texts.append(f"{DIFFICULTY_LABELS[d]}:({d})")
        texts.append("Quit:(q)")
        y = 140
        for t in texts:
            canvas.create_text(self.width / 2, y, text=t, font="Arial 20", fill=THEME["hud_text"], anchor=N)
            y += 50

    def gameStageRedrawAll(self):
        vm = self.vm
        layout = self.layout
        canvas = self.canvas
        self.drawHud()
        for i, rect in enumerate(layout.stackRects):
            (x, y) = rect.upperLeft
            if i in self.highlighted:
                canvas.create_rectangle(x - 3, y - 3, x + rect.width + 3, y + rect.height + 3,
                                        outline=THEME["highlight"], width=2)
            else:
                canvas.create_rectangle(x, y, x + rect.width, y + rect.height, outline=THEME["slot_outline"],
                                        dash=(4, 4))
        for i, stack in enumerate(vm.stacks):
            for j, card in enumerate(stack.cards):
                self.drawCard(layout.cardRects[i][j], card)
        if vm.stock_count > 0:
            (x, y) = layout.stockRect.upperLeft
            for k in range(vm.deals_left):
                canvas.create_rectangle(x + k * 4, y, x + k * 4 + layout.cardWidth, y + layout.cardHeight,
                                        fill=THEME["card_back"], outline=THEME["card_border"])
        if vm.game_ended:
            canvas.create_text(self.width / 2, self.height / 2, text="You win!", font="Arial 30",
                               fill=THEME["hud_text"], anchor=CENTER)
            canvas.create_text(self.width / 2, self.height / 2 + 40,
                               text=f"{vm.moves} moves, final score {vm.score}. Press n to play again.",
                               font="Arial 12", fill=THEME["hud_text"], anchor=CENTER)
        elif self.message is not None:
            canvas.create_text(self.width / 2, self.height - 40, text=self.message, font="Arial 16",
                               fill=THEME["message"], anchor=CENTER)
        elif self.status is not None:
            canvas.create_text(self.width / 2, self.height - 40, text=self.status, font="Arial 16",
                               fill=THEME["status"], anchor=CENTER)

    def drawHud(self):
        vm = self.vm
        canvas = self.canvas
        canvas.create_text(10, 10, anchor=NW, fill=THEME["hud_text"], font="Arial 14",
                           text=f"Score: {vm.score}    Moves: {vm.moves}    {DIFFICULTY_LABELS[vm.difficulty]}")
        x = self.width - 10
        for i in range(7, -1, -1):
            fill = THEME["foundation_done"] if i < vm.foundations else ""
            canvas.create_rectangle(x - 14, 10, x, 30, fill=fill, outline=THEME["hud_subtext"])
            x -= 18
        canvas.create_text(10, 34, anchor=NW, fill=THEME["hud_subtext"], font="Arial 10",
                           text="new game: n, difficulty: 1/2/4, menu: m, quit: q")

    def drawCard(self, rect, card):
        canvas = self.canvas
        (x, y) = rect.upperLeft
        fill = THEME["card_front"] if card.face_up else THEME["card_back"]
        outline = THEME["card_select"] if card.selected else THEME["card_border"]
        width = 3 if card.selected else 1
        canvas.create_rectangle(x, y, x + rect.width, y + rect.height, fill=fill, outline=outline, width=width)
        if card.face_up:
            fontSize = max(8, int(CARD_FONT_PERCENT * rect.width))
            canvas.create_text(x + 3, y + 2, anchor=NW, text=f"{card.rank}{card.suit}",
                               font="Arial " + str(fontSize), fill=card.color)

    def mousePressed(self, event):
        if self.stage != GAME or self.controller.gameEnded:
            return
        layout = self.layout
        self.clearNotes()
        hit = layout.hitCard(event.x, event.y)
        if hit is not None:
            self.controller.clickCard(*hit)
        elif layout.hitStock(event.x, event.y):
            self.controller.deal()
        else:
            column = layout.hitColumn(event.x, event.y)
            if column is not None and len(self.vm.stacks[column].cards) == 0:
                self.controller.clickEmptyColumn(column)
        self.notifyRedraw()

    def keyPressed(self, event):
        char = event.char
        if char == "q":
            self.onClosing()
        elif char == "n":
            self.startGame()
        elif char in DIFFICULTY_KEYS:
            self.startGame(DIFFICULTY_KEYS[char])
        elif char == "m" and self.stage == GAME:
            self.stage = MENU
            self.redrawAll()

    def clearNotes(self):
        self.message = None
        self.status = None
        self.highlighted = set()

    def onEvent(self, event):
        highlight = ControllerAdapter.event_to_highlight(event)
        if highlight is not None:
            self.highlighted.update(highlight.stacks)
            if highlight.text is not None:
                self.status = highlight.text
        super().onEvent(event)

    def onMessage(self, message: str):
        self.message = message

    def onWin(self):
        self.notifyRedraw()

    def notifyRedraw(self):
        if self.stage != GAME:
            return
        self.updateLayout()
        if self.canvas is not None:
            self.canvas.after(0, self.redrawAll)


def main():
    settings = load_settings()
    logging.basicConfig(level=settings["log_level"], format="%(levelname)s %(name)s: %(message)s")
    interface = TkInterface(settings)
    interface.run()


if __name__ == '__main__':
    main()
