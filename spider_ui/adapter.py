from typing import Optional

from spider.Core import STACK_COUNT
from spider.Game import CallDeal, CardMove, FreeStack, GameController, GameEvent, RevealTop
from spider_ui.view_model import CardView, EventHighlight, GameViewModel, StackView


class ControllerAdapter:
    """Bridges the controller's state/events to a renderer-friendly model."""

    @staticmethod
    def snapshot(controller: GameController) -> GameViewModel:
        state = controller.state
        stacks = []
        for i, column in enumerate(state.tableau):
            cards = tuple(
                CardView(
                    id=card.id,
                    suit=card.suit.value,
                    rank=card.rank,
                    color=card.suit.color(),
                    face_up=card.faceUp,
                    selected=controller.isSelected(i, j),
                )
                for j, card in enumerate(column)
            )
            stacks.append(StackView(cards=cards))
        return GameViewModel(
            difficulty=state.difficulty,
            stock_count=len(state.stock),
            deals_left=(len(state.stock) + STACK_COUNT - 1) // STACK_COUNT,
            foundations=state.foundations,
            moves=state.moves,
            score=state.score,
            game_ended=state.isWon,
            stacks=tuple(stacks),
        )

    @staticmethod
    def event_to_highlight(event: GameEvent) -> Optional[EventHighlight]:
        """Which columns an event touched, with a short note for deals and completed sets."""
        if isinstance(event, CardMove):
            return EventHighlight(stacks=(event.src[0], event.dest[0]))
        if isinstance(event, RevealTop):
            return EventHighlight(stacks=(event.idx,))
        if isinstance(event, CallDeal):
            return EventHighlight(stacks=tuple(range(event.drawCount)),
                                  text=f"Dealt {event.drawCount} cards")
        if isinstance(event, FreeStack):
            return EventHighlight(stacks=(event.idx,), text=f"Completed a {event.suit.value} set!")
        return None
