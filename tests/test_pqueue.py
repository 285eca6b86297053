import random
import unittest

from indexastar.pqueue import IndexedPriorityQueue


class TestIndexedPriorityQueue(unittest.TestCase):
    def assert_index_consistent(self, q):
        for slot, item in enumerate(q._heap):
            self.assertEqual(item.index, slot)
            self.assertIs(q._items[item.node], item)
        self.assertEqual(len(q._items), len(q._heap))

    def drain(self, q):
        out = []
        while q:
            out.append(q.extract_min())
        return out

    def test_extracts_in_priority_order(self):
        rng = random.Random(1)
        q = IndexedPriorityQueue()
        prios = {i: rng.uniform(0, 100) for i in range(200)}
        for node, pr in prios.items():
            q.insert(node, pr)
        self.assert_index_consistent(q)
        got = [pr for _, pr in self.drain(q)]
        self.assertEqual(got, sorted(prios.values()))

    def test_equal_priorities_leave_in_insertion_order(self):
        q = IndexedPriorityQueue()
        for node in "dcab":
            q.insert(node, 1.0)
        q.insert("z", 0.5)
        self.assertEqual([n for n, _ in self.drain(q)], ["z", "d", "c", "a", "b"])

    def test_decrease_moves_item_forward(self):
        q = IndexedPriorityQueue()
        q.insert("a", 1.0)
        q.insert("b", 5.0)
        q.insert("c", 3.0)
        q.decrease_priority("b", 0.5)
        self.assert_index_consistent(q)
        self.assertEqual(q.peek(), ("b", 0.5))
        self.assertEqual(q.priority("b"), 0.5)
        self.assertEqual([n for n, _ in self.drain(q)], ["b", "a", "c"])

    def test_decrease_keeps_first_insertion_tie_break(self):
        q = IndexedPriorityQueue()
        q.insert("first", 2.0)
        q.insert("second", 4.0)
        q.decrease_priority("second", 2.0)
        self.assertEqual([n for n, _ in self.drain(q)], ["first", "second"])

    def test_non_decreasing_update_does_not_corrupt_order(self):
        rng = random.Random(7)
        q = IndexedPriorityQueue()
        final = {}
        for node in range(100):
            final[node] = rng.uniform(0, 50)
            q.insert(node, final[node])
        for _ in range(300):
            node = rng.randrange(100)
            # same, larger or smaller values all go through decrease_priority
            final[node] = rng.choice([final[node], final[node] + rng.uniform(0, 20), rng.uniform(0, 50)])
            q.decrease_priority(node, final[node])
            self.assert_index_consistent(q)
        extracted = self.drain(q)
        prios = [pr for _, pr in extracted]
        self.assertEqual(prios, sorted(prios))
        self.assertEqual({n: pr for n, pr in extracted}, final)

    def test_interleaved_operations_extract_non_decreasing(self):
        rng = random.Random(3)
        q = IndexedPriorityQueue()
        last = float("-inf")
        next_node = 0
        for _ in range(500):
            op = rng.random()
            if op < 0.4 or not q:
                q.insert(next_node, last + rng.uniform(0, 10))
                next_node += 1
            elif op < 0.7:
                node = rng.choice([n for n, _ in q.snapshot()])
                q.decrease_priority(node, max(last, q.priority(node) - rng.uniform(0, 5)))
            else:
                _, pr = q.extract_min()
                self.assertGreaterEqual(pr, last)
                last = pr
            self.assert_index_consistent(q)

    def test_membership_and_size(self):
        q = IndexedPriorityQueue()
        self.assertTrue(q.empty())
        q.insert((0, 0), 1.0)
        q.insert((1, 0), 2.0)
        self.assertIn((0, 0), q)
        self.assertEqual(len(q), 2)
        q.extract_min()
        self.assertNotIn((0, 0), q)
        self.assertEqual(len(q), 1)
        self.assertFalse(q.empty())

    def test_duplicate_insert_rejected(self):
        q = IndexedPriorityQueue()
        q.insert("a", 1.0)
        with self.assertRaises(KeyError):
            q.insert("a", 0.0)
        self.assertEqual(len(q), 1)

    def test_empty_and_missing_errors(self):
        q = IndexedPriorityQueue()
        with self.assertRaises(IndexError):
            q.extract_min()
        with self.assertRaises(IndexError):
            q.peek()
        with self.assertRaises(KeyError):
            q.decrease_priority("ghost", 1.0)

    def test_clear(self):
        q = IndexedPriorityQueue()
        for i in range(5):
            q.insert(i, float(i))
        q.clear()
        self.assertTrue(q.empty())
        q.insert(3, 1.0)
        self.assertEqual(q.extract_min(), (3, 1.0))

    def test_infinite_priority_is_allowed(self):
        q = IndexedPriorityQueue()
        q.insert("far", float("inf"))
        q.insert("near", 1.0)
        self.assertEqual(q.extract_min()[0], "near")
        self.assertEqual(q.extract_min(), ("far", float("inf")))


if __name__ == "__main__":
    unittest.main()
