"""Visible-window math for long, variable-height lists.

The client sends its scroll position and viewport height; the server (or a
test) can compute exactly which rows need rendering and how far to offset
them. Heights are scanned linearly, which is fine for page-sized lists.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Tuple, Union

ItemHeight = Union[float, int, Callable[[int], float]]

LOAD_MORE_THRESHOLD_PX = 500


@dataclass
class VirtualWindow:
    start_index: int
    end_index: int
    offset_y: float
    total_height: float
    items: List[Tuple[int, float]] = field(default_factory=list)


def _heights(item_count: int, item_height: ItemHeight) -> List[float]:
    if callable(item_height):
        return [float(item_height(i)) for i in range(item_count)]
    return [float(item_height)] * item_count


def compute_window(
    item_count: int,
    item_height: ItemHeight,
    container_height: float,
    scroll_top: float,
    overscan: int = 5,
) -> VirtualWindow:
    """Return the indices to render for the given scroll position.

    ``items`` holds ``(index, offset)`` pairs where offset is the top of
    the row relative to the start of the list.
    """
    if item_count <= 0:
        return VirtualWindow(start_index=0, end_index=-1, offset_y=0.0, total_height=0.0)

    heights = _heights(item_count, item_height)
    total_height = sum(heights)

    start_index = 0
    accumulated = 0.0
    for i, h in enumerate(heights):
        if accumulated + h >= scroll_top:
            start_index = max(0, i - overscan)
            break
        accumulated += h

    end_index = item_count - 1
    accumulated = 0.0
    for i, h in enumerate(heights):
        accumulated += h
        if accumulated >= scroll_top + container_height:
            end_index = min(item_count - 1, i + overscan)
            break

    offset_y = sum(heights[:start_index])

    items = []
    cursor = offset_y
    for i in range(start_index, end_index + 1):
        items.append((i, cursor))
        cursor += heights[i]

    return VirtualWindow(
        start_index=start_index,
        end_index=end_index,
        offset_y=offset_y,
        total_height=total_height,
        items=items,
    )


def should_load_more(scroll_height: float, scroll_top: float, client_height: float,
                     threshold: float = LOAD_MORE_THRESHOLD_PX) -> bool:
    distance_from_bottom = scroll_height - (scroll_top + client_height)
    return distance_from_bottom < threshold
