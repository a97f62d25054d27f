from __future__ import annotations

import random

from sea_router.routing.priority_queue import IndexedPriorityQueue, QueueEntry


def _assert_consistent(queue: IndexedPriorityQueue) -> None:
    heap = queue._heap
    assert len(queue._index) == len(heap)
    for i, entry in enumerate(heap):
        assert queue._index[entry.node_id] == i
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(heap):
                assert heap[i].f_cost <= heap[child].f_cost


def test_pop_returns_entries_in_f_cost_order() -> None:
    queue = IndexedPriorityQueue()
    for node_id, f in [(1, 5.0), (2, 1.0), (3, 3.0), (4, 4.0), (5, 2.0)]:
        queue.push(QueueEntry(node_id, f, 0.0))
    assert [queue.pop().node_id for _ in range(5)] == [2, 5, 3, 4, 1]
    assert queue.is_empty()


def test_empty_queue_signals() -> None:
    queue = IndexedPriorityQueue()
    assert queue.pop() is None
    assert queue.peek() is None
    assert queue.is_empty()
    assert len(queue) == 0


def test_single_element_pop() -> None:
    queue = IndexedPriorityQueue()
    queue.push(QueueEntry(7, 1.5, 0.5))
    entry = queue.pop()
    assert (entry.node_id, entry.f_cost, entry.g_cost) == (7, 1.5, 0.5)
    assert not queue.has(7)
    assert queue.pop() is None


def test_push_existing_node_updates_instead_of_duplicating() -> None:
    queue = IndexedPriorityQueue()
    queue.push(QueueEntry(1, 10.0, 4.0))
    queue.push(QueueEntry(2, 5.0, 1.0))
    queue.push(QueueEntry(1, 2.0, 1.0))
    assert len(queue) == 2
    top = queue.pop()
    assert (top.node_id, top.f_cost, top.g_cost) == (1, 2.0, 1.0)


def test_update_moves_entry_both_ways() -> None:
    queue = IndexedPriorityQueue()
    for node_id in range(10):
        queue.push(QueueEntry(node_id, float(node_id), 0.0))
    assert queue.update(9, -1.0, 0.0)
    assert queue.peek().node_id == 9
    assert queue.update(9, 100.0, 3.0)
    _assert_consistent(queue)
    assert queue.peek().node_id == 0
    assert queue.update(0, 0.0, 7.0)
    assert queue.peek().g_cost == 7.0
    order = [queue.pop().node_id for _ in range(len(queue))]
    assert order == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_update_missing_node_returns_false() -> None:
    queue = IndexedPriorityQueue()
    queue.push(QueueEntry(1, 1.0, 0.0))
    assert queue.update(2, 0.5, 0.0) is False
    assert len(queue) == 1


def test_membership_queries() -> None:
    queue = IndexedPriorityQueue()
    queue.push(QueueEntry(3, 1.0, 0.0))
    assert queue.has(3) and 3 in queue
    assert not queue.has(4) and 4 not in queue


def test_index_stays_consistent_under_random_operations() -> None:
    rng = random.Random(42)
    queue = IndexedPriorityQueue()
    live = {}
    popped = []
    for _ in range(2000):
        op = rng.random()
        if op < 0.5:
            node_id = rng.randrange(200)
            f = rng.uniform(0, 100)
            queue.push(QueueEntry(node_id, f, f / 2))
            live[node_id] = f
        elif op < 0.8 and live:
            node_id = rng.choice(sorted(live))
            f = rng.uniform(0, 100)
            assert queue.update(node_id, f, 0.0)
            live[node_id] = f
        else:
            entry = queue.pop()
            if entry is None:
                assert not live
                continue
            assert entry.f_cost == min(live.values())
            assert live.pop(entry.node_id) == entry.f_cost
            popped.append(entry.node_id)
        _assert_consistent(queue)
        assert len(queue) == len(live)
    assert popped
