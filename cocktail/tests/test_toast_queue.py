import unittest
from cocktail.events.clock import ManualClock
from cocktail.events.Event_Bus import EventBus, TOAST_EXPIRED, TOAST_PUSHED
from cocktail.events.Toast_Queue import ToastQueue


class TestToastQueue(unittest.TestCase):

    def setUp(self):
        self.clock = ManualClock()
        self.queue = ToastQueue(self.clock, delay=3.5)

    def test_message_expires_after_full_delay(self):
        self.queue.push("X")
        self.clock.advance(3.4)
        self.assertEqual(self.queue.messages(), ["X"])
        self.clock.advance(0.1)
        self.assertEqual(self.queue.messages(), [])

    def test_two_identical_pushes_expire_after_one_delay(self):
        self.queue.push("X")
        self.queue.push("X")
        self.assertEqual(self.queue.messages(), ["X", "X"])
        self.clock.advance(3.5)
        self.assertEqual(self.queue.messages(), [])

    def test_duplicates_expire_in_push_order(self):
        first = self.queue.push("X")
        self.clock.advance(1)
        second = self.queue.push("X")
        self.clock.advance(2.5)
        remaining = self.queue.toasts()
        self.assertEqual([t.toast_id for t in remaining], [second])
        self.assertNotEqual(first, second)
        self.clock.advance(1)
        self.assertEqual(len(self.queue), 0)

    def test_display_order_is_insertion_order(self):
        self.queue.push("Searching...")
        self.clock.advance(1)
        self.queue.push("Here are the results.")
        self.queue.push("Ingredients added to shopping list.")
        self.assertEqual(self.queue.messages(), [
            "Searching...", "Here are the results.", "Ingredients added to shopping list."
        ])
        self.clock.advance(2.5)
        self.assertEqual(self.queue.messages(), ["Here are the results.", "Ingredients added to shopping list."])

    def test_clear_cancels_timers(self):
        self.queue.push("A")
        self.queue.clear()
        self.assertEqual(self.clock.pending(), 0)
        self.assertEqual(self.clock.advance(10), 0)

    def test_bus_sees_push_and_expiry(self):
        bus = EventBus()
        events = []
        bus.subscribe(TOAST_PUSHED, lambda name, t: events.append((name, t.message)))
        bus.subscribe(TOAST_EXPIRED, lambda name, t: events.append((name, t.message)))
        queue = ToastQueue(self.clock, delay=3.5, bus=bus)
        queue.push("Hi")
        self.clock.advance(3.5)
        self.assertEqual(events, [(TOAST_PUSHED, "Hi"), (TOAST_EXPIRED, "Hi")])


class TestManualClock(unittest.TestCase):

    def test_fires_due_timers_in_order(self):
        clock = ManualClock()
        fired = []
        clock.call_later(2, lambda: fired.append("b"))
        clock.call_later(1, lambda: fired.append("a"))
        clock.call_later(2, lambda: fired.append("c"))
        self.assertEqual(clock.advance(2), 3)
        self.assertEqual(fired, ["a", "b", "c"])
        self.assertEqual(clock.now(), 2)

    def test_cancelled_timer_does_not_fire(self):
        clock = ManualClock()
        fired = []
        handle = clock.call_later(1, lambda: fired.append("x"))
        handle.cancel()
        clock.advance(5)
        self.assertEqual(fired, [])
