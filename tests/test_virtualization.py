from app.utils.virtualization import compute_window, should_load_more


def test_fixed_height_window_with_overscan():
    w = compute_window(100, 50, container_height=500, scroll_top=1000, overscan=5)
    assert w.start_index == 14
    assert w.end_index == 34
    assert w.offset_y == 700
    assert w.total_height == 5000
    assert w.items[0] == (14, 700)
    assert len(w.items) == 21


def test_window_at_top():
    w = compute_window(100, 50, container_height=500, scroll_top=0, overscan=5)
    assert w.start_index == 0
    assert w.end_index == 14
    assert w.offset_y == 0


def test_window_clamped_at_end():
    w = compute_window(10, 50, container_height=500, scroll_top=400, overscan=5)
    assert w.end_index == 9


def test_variable_heights():
    w = compute_window(4, lambda i: (i + 1) * 10, container_height=15, scroll_top=0, overscan=0)
    assert w.total_height == 100
    assert (w.start_index, w.end_index) == (0, 1)
    assert w.items == [(0, 0.0), (1, 10.0)]


def test_empty_list():
    w = compute_window(0, 50, container_height=500, scroll_top=0)
    assert w.items == []
    assert w.total_height == 0


def test_should_load_more():
    assert should_load_more(2000, 1200, 400) is True
    assert should_load_more(2000, 0, 400) is False
