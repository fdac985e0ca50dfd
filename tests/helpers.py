from __future__ import annotations

from typing import Any

from jumpboard.events.bus import EVENT_TILE_CLICK, EventBus


def capture(bus: EventBus, event_name: str) -> list[dict[str, Any]]:
    """Subscribe a recorder to event_name and return the list it appends payloads to."""
    received: list[dict[str, Any]] = []
    bus.subscribe(event_name, lambda sender, **payload: received.append(payload))
    return received


def click(bus: EventBus, row: int, col: int) -> None:
    """Activate an absolute board cell, bypassing the viewport."""
    bus.emit(EVENT_TILE_CLICK, row=row, col=col)


def jump(bus: EventBus, src: tuple[int, int], dst: tuple[int, int]) -> None:
    click(bus, *src)
    click(bus, *dst)


def diff_cells(before, after) -> tuple[set[tuple[int, int]], set[tuple[int, int]]]:
    """Return (removed, added) occupied positions between two snapshots."""
    removed: set[tuple[int, int]] = set()
    added: set[tuple[int, int]] = set()
    for r, (row_before, row_after) in enumerate(zip(before, after)):
        for c, (was, now) in enumerate(zip(row_before, row_after)):
            if was and not now:
                removed.add((r, c))
            elif now and not was:
                added.add((r, c))
    return removed, added


def count_pieces(board) -> int:
    return sum(sum(1 for cell in row_cells if cell) for row_cells in board)
