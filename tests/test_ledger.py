import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from maze.ledger import VisitLedger, VisitRecord

def test_seed_and_discover_chain():
    L = VisitLedger(4, 3)
    s = L.seed((0, 0))
    a = L.discover(s, (2, 1))
    b = L.discover(a, (3, 2))
    assert L.records[s] == VisitRecord(0, (0, 0), None)
    assert L.records[b] == VisitRecord(2, (3, 2), a)
    assert [r.position for r in L.chain(b)] == [(0, 0), (2, 1), (3, 2)]
    assert [r.distance for r in L.chain(b)] == [0, 1, 2]
    assert L.is_visited((2, 1)) and not L.is_visited((1, 1))
    assert L.record_at((3, 2)).predecessor == a
    assert L.record_at((1, 1)) is None

def test_cell_recorded_once():
    L = VisitLedger(2, 2)
    s = L.seed((0, 0))
    L.discover(s, (1, 1))
    with pytest.raises(ValueError):
        L.discover(s, (1, 1))
    with pytest.raises(RuntimeError):
        L.seed((1, 0))

def test_out_of_range_cells_do_not_wrap():
    L = VisitLedger(3, 1)
    L.seed((2, 0))
    assert not L.is_visited((-1, 0))
    assert L.record_at((-1, 0)) is None
    assert not L.is_visited((3, 0)) and not L.is_visited((0, 1))
    with pytest.raises(ValueError):
        L.discover(0, (-1, 0))
    assert len(L) == 1

def test_frontier_cursor():
    L = VisitLedger(3, 3)
    s = L.seed((1, 1))
    assert list(L.pending_range()) == [0]
    L.discover(s, (0, 1))
    L.discover(s, (2, 1))
    L.advance(1)
    assert list(L.pending_range()) == [1, 2]
    L.advance(3)
    assert len(L.pending_range()) == 0

def test_records_are_write_once():
    rec = VisitRecord(1, (0, 0), None)
    with pytest.raises(Exception):
        rec.distance = 5

def test_distance_map():
    L = VisitLedger(3, 1)
    s = L.seed((0, 0))
    L.discover(s, (2, 0))
    d = L.distances()
    assert d.tolist() == [[0, -1, 1]]
