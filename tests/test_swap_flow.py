import pytest

from blackout.events.bus import (
    EVENT_CLICK_REJECTED,
    EVENT_TILE_CLICK,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_FINALIZE,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_VALID,
)
from blackout.systems.board_ops import AdjacencyRule, is_adjacent, is_linear_adjacent, linear_index
from tests.helpers import build_session


class Recorder:
    def __init__(self, bus, *names):
        self.events = {name: [] for name in names}
        for name in names:
            bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name):
        def handler(sender, **payload):
            self.events[name].append(payload)
        return handler

    def __getitem__(self, name):
        return self.events[name]


def click(session, row, col):
    session.bus.emit(EVENT_TILE_CLICK, row=row, col=col)


def test_first_click_only_records_selection():
    session = build_session()
    rec = Recorder(session.bus, EVENT_TILE_SELECTED, EVENT_TILE_SWAP_FINALIZE)
    before = session.board.snapshot()
    click(session, 3, 3)
    assert session.board_system.selected == (3, 3)
    assert rec[EVENT_TILE_SELECTED] == [{'row': 3, 'col': 3}]
    assert rec[EVENT_TILE_SWAP_FINALIZE] == []
    assert session.board.snapshot() == before


def test_adjacent_second_click_swaps_and_returns_to_idle():
    session = build_session()
    rec = Recorder(session.bus, EVENT_TILE_SWAP_VALID, EVENT_TILE_SWAP_FINALIZE)
    a = session.board.color_at(3, 3)
    b = session.board.color_at(3, 4)
    click(session, 3, 3)
    click(session, 3, 4)
    assert session.board.color_at(3, 3) is b
    assert session.board.color_at(3, 4) is a
    assert session.board_system.selected is None
    assert rec[EVENT_TILE_SWAP_VALID] == [{'src': (3, 3), 'dst': (3, 4)}]
    assert rec[EVENT_TILE_SWAP_FINALIZE] == [{'src': (3, 3), 'dst': (3, 4), 'accepted': True}]


def test_vertical_neighbour_swap_is_accepted():
    session = build_session()
    a = session.board.color_at(3, 3)
    click(session, 3, 3)
    click(session, 4, 3)
    assert session.board.color_at(4, 3) is a


def test_swapping_back_restores_board():
    session = build_session()
    before = session.board.snapshot()
    for _ in range(2):
        click(session, 3, 3)
        click(session, 3, 4)
    assert session.board.snapshot() == before


@pytest.mark.parametrize("dst", [(3, 5), (4, 4), (3, 3), (10, 8), (0, 0)])
def test_non_adjacent_swap_leaves_board_unchanged(dst):
    session = build_session()
    rec = Recorder(session.bus, EVENT_TILE_SWAP_INVALID, EVENT_TILE_SWAP_FINALIZE)
    before = session.board.snapshot()
    click(session, 3, 3)
    click(session, *dst)
    assert session.board.snapshot() == before
    assert session.board_system.selected is None
    assert rec[EVENT_TILE_SWAP_INVALID][0]['reason'] == 'not_adjacent'
    assert rec[EVENT_TILE_SWAP_FINALIZE][0]['accepted'] is False


@pytest.mark.parametrize("first,second", [((3, 3), (3, 4)), ((3, 4), (3, 3))])
def test_swap_with_inert_cell_is_rejected(first, second):
    session = build_session()
    session.board.set_inert(3, 4)
    rec = Recorder(session.bus, EVENT_TILE_SWAP_INVALID)
    before = session.board.snapshot()
    click(session, *first)
    click(session, *second)
    assert session.board.snapshot() == before
    assert session.board.is_inert(3, 4)
    assert rec[EVENT_TILE_SWAP_INVALID][0]['reason'] == 'inert'


def test_out_of_range_first_click_stays_idle():
    session = build_session()
    rec = Recorder(session.bus, EVENT_CLICK_REJECTED, EVENT_TILE_SWAP_FINALIZE)
    click(session, 25, 0)
    assert session.board_system.selected is None
    assert rec[EVENT_CLICK_REJECTED] == [{'row': 25, 'col': 0, 'reason': 'out_of_range'}]
    assert rec[EVENT_TILE_SWAP_FINALIZE] == []


def test_out_of_range_second_click_is_rejected():
    session = build_session()
    rec = Recorder(session.bus, EVENT_TILE_SWAP_INVALID)
    before = session.board.snapshot()
    click(session, 0, 9)
    click(session, 0, 10)
    assert session.board.snapshot() == before
    assert session.board_system.selected is None
    assert rec[EVENT_TILE_SWAP_INVALID][0]['reason'] == 'out_of_range'


def test_click_payload_without_coordinates_is_ignored():
    session = build_session()
    session.bus.emit(EVENT_TILE_CLICK, row=2)
    assert session.board_system.selected is None


def test_strict_rule_rejects_column_wraparound():
    session = build_session()
    before = session.board.snapshot()
    click(session, 19, 0)
    click(session, 0, 1)
    assert session.board.snapshot() == before


def test_linear_rule_accepts_column_wraparound():
    session = build_session(adjacency=AdjacencyRule.LINEAR)
    top = session.board.color_at(19, 0)
    bottom = session.board.color_at(0, 1)
    click(session, 19, 0)
    click(session, 0, 1)
    assert session.board.color_at(19, 0) is bottom
    assert session.board.color_at(0, 1) is top


def test_adjacency_helpers():
    assert linear_index(3, 2, 20) == 43
    assert is_adjacent((3, 3), (2, 3))
    assert not is_adjacent((3, 3), (4, 4))
    assert is_linear_adjacent((3, 3), (3, 4), 20)
    assert is_linear_adjacent((19, 0), (0, 1), 20)
    assert not is_linear_adjacent((3, 3), (4, 4), 20)


def test_every_strictly_adjacent_pair_is_linear_adjacent():
    for row in range(20):
        for col in range(10):
            for dr, dc in ((0, 1), (1, 0)):
                other = (row + dr, col + dc)
                if other[0] < 20 and other[1] < 10:
                    assert is_linear_adjacent((row, col), other, 20)


@pytest.mark.parametrize("row,col", [(3.0, 3.0), ("3", "3"), (True, 1), (2, None)])
def test_click_with_non_integer_coordinates_is_ignored(row, col):
    session = build_session()
    before = session.board.snapshot()
    session.bus.emit(EVENT_TILE_CLICK, row=row, col=col)
    session.bus.emit(EVENT_TILE_CLICK, row=row, col=col)
    assert session.board_system.selected is None
    assert session.board.snapshot() == before


def test_non_integer_second_click_keeps_selection_pending():
    session = build_session()
    click(session, 2, 2)
    session.bus.emit(EVENT_TILE_CLICK, row=2.0, col=3.0)
    assert session.board_system.selected == (2, 2)
