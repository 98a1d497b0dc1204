import unittest
from itertools import count

from spider.Core import Card, Suit
from spider.Game import CallDeal, CardMove, FreeStack, GameController, GameEvent, GameState, RevealTop
from spider_ui.adapter import ControllerAdapter


_ids = count(1000)


def up(suit, rank):
    return Card(next(_ids), suit, rank, True)


def down(suit, rank):
    return Card(next(_ids), suit, rank, False)


class ControllerAdapterTestCase(unittest.TestCase):
    def test_snapshot_mirrors_state_and_selection(self):
        controller = GameController()
        tableau = ((down(Suit.SPADES, "2"), up(Suit.HEARTS, "9"), up(Suit.HEARTS, "8")),) + ((),) * 9
        stock = tuple(down(Suit.SPADES, "A") for _ in range(20))
        controller.state = GameState(tableau=tableau, stock=stock, difficulty=2, foundations=3, moves=7,
                                     score=793)
        controller.clickCard(0, 1)

        vm = ControllerAdapter.snapshot(controller)
        self.assertEqual(20, vm.stock_count)
        self.assertEqual(2, vm.deals_left)
        self.assertEqual((2, 3, 7, 793), (vm.difficulty, vm.foundations, vm.moves, vm.score))
        self.assertFalse(vm.game_ended)
        self.assertEqual(10, len(vm.stacks))
        cards = vm.stacks[0].cards
        self.assertEqual([False, True, True], [c.face_up for c in cards])
        self.assertEqual([False, True, True], [c.selected for c in cards])
        self.assertEqual(("♥", "9"), (cards[1].suit, cards[1].rank))
        self.assertEqual("red", cards[1].color)

    def test_snapshot_of_new_game(self):
        controller = GameController()
        controller.newGame(1)
        vm = ControllerAdapter.snapshot(controller)
        self.assertEqual(50, vm.stock_count)
        self.assertEqual(5, vm.deals_left)
        self.assertEqual(500, vm.score)
        self.assertEqual(54, sum(len(s.cards) for s in vm.stacks))

    def test_event_highlights(self):
        move = ControllerAdapter.event_to_highlight(CardMove((0, 1), (2, 4)))
        deal = ControllerAdapter.event_to_highlight(CallDeal(10))
        reveal = ControllerAdapter.event_to_highlight(RevealTop(3))
        free = ControllerAdapter.event_to_highlight(FreeStack(1, Suit.CLUBS))

        self.assertEqual((0, 2), move.stacks)
        self.assertIsNone(move.text)
        self.assertEqual(tuple(range(10)), deal.stacks)
        self.assertEqual("Dealt 10 cards", deal.text)
        self.assertEqual((3,), reveal.stacks)
        self.assertEqual((1,), free.stacks)
        self.assertEqual("Completed a ♣ set!", free.text)
        self.assertIsNone(ControllerAdapter.event_to_highlight(GameEvent()))


if __name__ == "__main__":
    unittest.main()
