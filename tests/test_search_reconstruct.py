import pytest

from gridpath.search.reconstruct import reconstruct_path


def test_walks_back_to_root_and_reverses():
    links = {(2, 0): (1, 0), (1, 0): (0, 0), (0, 0): None}
    assert reconstruct_path((2, 0), links.get, 9) == [(0, 0), (1, 0), (2, 0)]


def test_single_cell_chain():
    assert reconstruct_path((3, 3), lambda c: None, 1) == [(3, 3)]


def test_cycle_is_an_invariant_violation():
    links = {(0, 0): (1, 0), (1, 0): (0, 0)}
    with pytest.raises(RuntimeError):
        reconstruct_path((0, 0), links.get, 4)
