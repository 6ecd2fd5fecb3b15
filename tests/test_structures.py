import random

import pytest

from graphalgo.structures import BinaryHeap, DisjointSet, PairingHeap


def drain(heap):
    out = []
    while len(heap):
        out.append(heap.pop())
    return out


def test_binary_heap_build_pops_in_weight_order():
    weights = [7, 3, 9, 1, 5, 8, 2]
    heap = BinaryHeap(weights, range(len(weights)))
    assert len(heap) == len(weights)
    popped = drain(heap)
    assert [weights[i] for i in popped] == sorted(weights)
    assert sorted(popped) == list(range(len(weights)))


def test_binary_heap_push_and_pop_mixed():
    rng = random.Random(4)
    weights = [rng.randint(-50, 50) for _ in range(200)]
    heap = BinaryHeap(weights)
    for item in range(100):
        heap.push(item)
    first = [heap.pop() for _ in range(30)]
    for item in range(100, 200):
        heap.push(item)
    rest = drain(heap)
    assert [weights[i] for i in first] == sorted(weights[i] for i in first)
    assert [weights[i] for i in rest] == sorted(weights[i] for i in rest)
    assert max(weights[i] for i in first) <= min(
        weights[i] for i in rest if i < 100
    )
    assert sorted(first + rest) == list(range(200))


def test_binary_heap_mapping_weights():
    weights = {10: 2.5, 20: -1.0, 30: 0.0}
    heap = BinaryHeap(weights, weights.keys())
    assert drain(heap) == [20, 30, 10]


def test_binary_heap_pop_empty_raises():
    heap = BinaryHeap([1, 2])
    with pytest.raises(IndexError):
        heap.pop()


def test_pairing_heap_orders_items():
    weights = [4, 1, 3, 0, 2]
    heap = PairingHeap(weights)
    assert not heap
    for item in range(5):
        heap.push(item)
    assert heap
    out = []
    while heap:
        out.append(heap.pop())
    assert [weights[i] for i in out] == sorted(weights)


def test_pairing_heap_decrease_key():
    weights = [10, 20, 30, 40]
    heap = PairingHeap(weights)
    for item in range(4):
        heap.push(item)
    weights[3] = 5
    heap.update(3)
    assert heap.pop() == 3
    weights[2] = 1
    heap.update(2)
    assert heap.pop() == 2
    assert heap.pop() == 0
    assert heap.pop() == 1
    assert not heap


def test_pairing_heap_update_root():
    weights = [1, 2]
    heap = PairingHeap(weights)
    heap.push(0)
    heap.push(1)
    weights[0] = 0
    heap.update(0)
    assert heap.pop() == 0
    assert heap.pop() == 1


def test_pairing_heap_randomized_with_decreases():
    rng = random.Random(11)
    size = 300
    weights = [rng.randint(0, 1000) for _ in range(size)]
    heap = PairingHeap(weights)
    for item in range(size):
        heap.push(item)
    for _ in range(40):
        heap.pop()
    remaining = [item for item in range(size) if item in heap]
    for item in rng.sample(remaining, 100):
        weights[item] -= rng.randint(0, 500)
        heap.update(item)
    out = []
    while heap:
        out.append(heap.pop())
    assert sorted(out) == sorted(remaining)
    assert [weights[i] for i in out] == sorted(weights[i] for i in remaining)


def test_pairing_heap_item_can_be_pushed_again_after_pop():
    weights = [3, 1]
    heap = PairingHeap(weights)
    heap.push(0)
    heap.push(1)
    assert heap.pop() == 1
    heap.push(1)
    assert len(heap) == 2
    assert heap.pop() == 1


def test_pairing_heap_errors():
    heap = PairingHeap([1, 2])
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(KeyError):
        heap.update(0)
    heap.push(0)
    with pytest.raises(ValueError):
        heap.push(0)


def test_disjoint_set_initially_separate():
    ds = DisjointSet(5)
    assert [ds.find(i) for i in range(5)] == list(range(5))


def test_disjoint_set_union_connects_transitively():
    ds = DisjointSet(6)
    ds.union(0, 1)
    ds.union(2, 3)
    assert ds.find(0) == ds.find(1)
    assert ds.find(0) != ds.find(2)
    root = ds.union(1, 3)
    assert {ds.find(i) for i in range(4)} == {root}
    assert ds.find(4) == 4
    assert ds.find(5) == 5


def test_disjoint_set_union_same_class_is_stable():
    ds = DisjointSet(3)
    root = ds.union(0, 2)
    assert ds.union(2, 0) == root
    assert ds.find(1) == 1


def test_disjoint_set_random_against_partition():
    rng = random.Random(2)
    size = 50
    ds = DisjointSet(size)
    groups = [{i} for i in range(size)]
    for _ in range(40):
        a, b = rng.randrange(size), rng.randrange(size)
        ds.union(a, b)
        ga = next(g for g in groups if a in g)
        gb = next(g for g in groups if b in g)
        if ga is not gb:
            groups.remove(gb)
            ga |= gb
    for group in groups:
        assert len({ds.find(i) for i in group}) == 1
    assert len({ds.find(i) for i in range(size)}) == len(groups)


def test_disjoint_set_out_of_range():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.union(-1, 0)
    with pytest.raises(ValueError):
        DisjointSet(-1)