import pytest

from nanovec.core.buffer import Buffer, swap
from nanovec.core.view import View
from nanovec.dtype.dtype import INT64


def _arange(n: int) -> Buffer:
    return Buffer.from_list(list(range(n)), dtype=INT64)


# ---------------------------
# construction
# ---------------------------

def test_view_constructor():
    buf = _arange(10)
    view = View(buf, 2, 8, 2)
    assert view.base is buf
    assert view.count == 3
    assert view.start_index == 2
    assert view.step == 2
    assert view.dtype is INT64
    assert view.to_list() == [2, 4, 6]


def test_view_constructor_bounds():
    buf = _arange(4)
    with pytest.raises(IndexError):
        View(buf, 0, 5)
    with pytest.raises(IndexError):
        View(buf, -1, 2)
    with pytest.raises(ValueError):
        View(buf, 0, 2, 0)
    with pytest.raises(TypeError):
        View([0, 1, 2], 0, 2)


def test_view_end_is_kept_as_given():
    buf = _arange(10)
    view = View(buf, 8, 10, 4)
    assert view.to_list() == [8]
    assert view.end_index == 10
    assert repr(view) == "View([8], start=8, end=10, step=4)"
    assert buf[8:10:4].end_index == 10
    assert buf[::-1].end_index == -1
    assert buf[2:9][1:4].end_index == 6


def test_view_constructor_rejects_end_past_base():
    buf = _arange(10)
    with pytest.raises(IndexError):
        View(buf, 8, 11, 4)
    with pytest.raises(IndexError):
        View(buf, 2, -2, -1)


def test_sub_slice_bounds_are_not_clamped():
    view = _arange(10)[2:6]
    with pytest.raises(IndexError):
        _ = view[1:10]
    with pytest.raises(IndexError):
        _ = view[-2:]
    with pytest.raises(IndexError):
        view[3:8] = [0, 0]
    assert view[4:].count == 0


def test_empty_views():
    buf = _arange(4)
    assert buf[2:2].count == 0
    assert buf[3:1].to_list() == []
    assert Buffer(0)[:].count == 0


# ---------------------------
# element access
# ---------------------------

def test_view_index_out_of_bounds():
    view = _arange(10)[2:5]
    with pytest.raises(IndexError):
        _ = view[3]
    with pytest.raises(IndexError):
        _ = view[-1]
    with pytest.raises(IndexError):
        view[3] = 0


def test_view_write_mutates_base():
    buf = _arange(6)
    view = buf[1:6:2]
    view[1] = 30
    assert buf.to_list() == [0, 1, 2, 30, 4, 5]


def test_views_observe_live_state():
    buf = _arange(4)
    first = buf[0:2]
    second = buf[1:3]
    first[1] = 100
    assert second[0] == 100


def test_elementwise_combination_of_two_views():
    a = Buffer.from_list([1.0, 2.0, 3.0, 4.0])
    total = Buffer.from_list([x + y for x, y in zip(a[0:2], a[2:4])])
    assert total.count == 2
    assert total.to_list() == [4.0, 6.0]


# ---------------------------
# sub-slicing
# ---------------------------

def test_sub_slice_composes_offsets():
    buf = _arange(10)
    mid = buf[2:9]
    sub = mid[1:4]
    assert sub.base is buf
    assert sub.start_index == 3
    assert sub.to_list() == [3, 4, 5]


def test_double_strided_slice_equivalence():
    buf = _arange(30)
    mid = buf[::2]
    fin = mid[::3]
    direct = buf[::6]
    assert fin.to_list() == direct.to_list() == [0, 6, 12, 18, 24]
    assert fin == direct
    assert fin.step == 6
    assert fin.base is buf


def test_negative_step_views():
    buf = _arange(6)
    rev = buf[::-1]
    assert rev.to_list() == [5, 4, 3, 2, 1, 0]
    assert rev[1:4].to_list() == [4, 3, 2]
    assert rev[::-1] == buf
    rev[0] = 50
    assert buf[5] == 50


def test_slicing_is_associative():
    buf = _arange(20)
    assert buf[2:18][3:12][::2] == buf[5:14:2]
    assert buf[1::3][1:5][::-1] == buf[13:3:-3]


# ---------------------------
# slice assignment
# ---------------------------

def test_view_slice_assignment_translates_indices():
    buf = _arange(8)
    view = buf[::2]
    view[1:3] = [20, 40]
    assert buf.to_list() == [0, 1, 20, 3, 40, 5, 6, 7]


def test_view_slice_assignment_length_mismatch():
    buf = _arange(8)
    with pytest.raises(ValueError):
        buf[::2][0:2] = [1]
    assert buf == _arange(8)


# ---------------------------
# equality
# ---------------------------

def test_view_equality_rules():
    buf = _arange(6)
    assert buf[0:3] == Buffer.from_list([0, 1, 2])
    assert Buffer.from_list([0, 1, 2]) == buf[0:3]
    assert buf[0:3] != buf[0:4]
    assert buf[0:2] != buf[1:3]
    assert buf[::2] == _arange(6)[::2]


def test_view_description():
    buf = _arange(5)
    assert str(buf[1:4]) == "[1, 2, 3]"
    assert repr(buf[1:5:2]) == "View([1, 3], start=1, end=5, step=2)"


# ---------------------------
# materialization and windows
# ---------------------------

def test_to_buffer_materializes():
    buf = _arange(6)
    owned = buf[1::2].to_buffer()
    assert isinstance(owned, Buffer)
    assert owned.to_list() == [1, 3, 5]
    owned[0] = 9
    assert buf[1] == 1


def test_view_has_no_growth():
    view = _arange(3)[0:2]
    assert not hasattr(view, "append")
    assert not hasattr(view, "copy")


def test_reading_window_uses_base_index_space():
    buf = _arange(10)
    view = buf[2:10:3]
    with view.reading() as window:
        assert window.readonly
        assert len(window) == buf.count
        assert [window[view.start_index + i * view.step] for i in range(view.count)] == [2, 5, 8]


def test_writing_window_and_release():
    buf = _arange(4)
    with buf.writing() as window:
        window[0] = 42
        escaped = window
    assert buf[0] == 42
    with pytest.raises(ValueError):
        _ = escaped[0]


def test_window_released_on_error():
    buf = _arange(4)
    with pytest.raises(RuntimeError):
        with buf.reading() as window:
            escaped = window
            raise RuntimeError("boom")
    with pytest.raises(ValueError):
        _ = escaped[0]


def test_view_after_base_shrinks_raises():
    buf = _arange(10)
    view = buf[5:9]
    swap(buf, Buffer.from_list([1, 2], dtype=INT64))
    with pytest.raises(IndexError):
        _ = view[0]


if __name__ == '__main__':
    pytest.main([__file__])
