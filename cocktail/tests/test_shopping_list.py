import unittest
from cocktail.domain.Ingredient import Ingredient
from cocktail.domain.ShoppingList import ShoppingAggregator, ShoppingEntry, sort_key
from cocktail.events.Event_Bus import EventBus, SHOPPING_CHANGED


class TestShoppingAggregator(unittest.TestCase):

    def setUp(self):
        self.toasts = []
        self.shopping = ShoppingAggregator(notify=self.toasts.append)

    def test_case_insensitive_merge_keeps_first_casing(self):
        self.shopping.add_many([Ingredient("Lime", "1 oz"), Ingredient("lime", "2 oz")])
        self.assertEqual(self.shopping.entries(), [ShoppingEntry("Lime", ["1 oz", "2 oz"])])

    def test_measures_have_no_duplicates_or_blanks(self):
        self.shopping.add_many([Ingredient("Mint", ""), Ingredient("MINT", "3 leaves")])
        self.shopping.add_many([Ingredient("mint", "3 leaves"), Ingredient("Mint", "")])
        entry = self.shopping.get("mint")
        self.assertEqual(entry.name, "Mint")
        self.assertEqual(entry.measures, ["3 leaves"])
        self.assertEqual(len(self.shopping), 1)

    def test_first_entry_without_measure_has_empty_list(self):
        self.shopping.add_many([Ingredient("Salt", "")])
        self.assertEqual(self.shopping.get("salt").measures, [])

    def test_one_toast_per_batch(self):
        self.shopping.add_many([Ingredient("Gin", "2 oz"), Ingredient("Tonic", "4 oz")])
        self.assertEqual(self.toasts, ["Ingredients added to shopping list."])

    def test_empty_batch_still_confirms(self):
        self.shopping.add_many([])
        self.assertEqual(self.toasts, ["Ingredients added to shopping list."])
        self.assertEqual(len(self.shopping), 0)

    def test_remove_any_casing_then_remove_again(self):
        self.shopping.add_many([Ingredient("Lime", "1 oz")])
        self.shopping.remove("LIME")
        self.assertNotIn("lime", self.shopping)
        self.shopping.remove("lime")
        self.assertEqual(len(self.shopping), 0)
        self.assertEqual(self.toasts, [
            "Ingredients added to shopping list.",
            "Ingredients removed from shopping list.",
            "Ingredients removed from shopping list.",
        ])

    def test_snapshot_sorted_entries_insertion_ordered(self):
        self.shopping.add_many([Ingredient("Vodka", ""), Ingredient("angostura bitters", "dash"),
                                Ingredient("Lime", "1 oz")])
        self.assertEqual([e.name for e in self.shopping.entries()], ["Vodka", "angostura bitters", "Lime"])
        self.assertEqual([e.name for e in self.shopping.snapshot()], ["angostura bitters", "Lime", "Vodka"])

    def test_snapshot_ignores_accents(self):
        self.shopping.add_many([Ingredient("Orange", ""), Ingredient("Éclair syrup", ""), Ingredient("Apple", "")])
        self.assertEqual([e.name for e in self.shopping.snapshot()], ["Apple", "Éclair syrup", "Orange"])

    def test_snapshot_is_a_copy(self):
        self.shopping.add_many([Ingredient("Gin", "2 oz")])
        self.shopping.snapshot()[0].measures.append("bogus")
        self.assertEqual(self.shopping.get("gin").measures, ["2 oz"])

    def test_invariants_over_many_batches(self):
        batches = [
            [Ingredient("Rum", "2 oz"), Ingredient("rum", "2 oz"), Ingredient("Sugar", "")],
            [Ingredient("RUM", "1 oz"), Ingredient("sugar", "1 tsp"), Ingredient("Soda", "top")],
            [Ingredient("Sugar", "1 tsp"), Ingredient("soda", "")],
        ]
        for b in batches:
            self.shopping.add_many(b)
        keys = [e.name.lower() for e in self.shopping.entries()]
        self.assertEqual(len(keys), len(set(keys)))
        for e in self.shopping.entries():
            self.assertEqual(len(e.measures), len(set(e.measures)))
            self.assertNotIn("", e.measures)
        self.assertEqual(self.shopping.get("rum").measures, ["2 oz", "1 oz"])
        names = [e.name for e in self.shopping.snapshot()]
        self.assertEqual(names, sorted(names, key=sort_key))

    def test_publishes_change_events(self):
        bus = EventBus()
        seen = []
        bus.subscribe(SHOPPING_CHANGED, lambda name, payload: seen.append(payload))
        shopping = ShoppingAggregator(bus=bus)
        shopping.add_many([Ingredient("Gin", "")])
        shopping.remove("gin")
        self.assertEqual(seen, [{"action": "add", "count": 1}, {"action": "remove", "count": 0}])
