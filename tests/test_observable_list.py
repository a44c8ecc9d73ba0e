from __future__ import annotations

import pytest

from playermarkers.app.observable import ObservableList


class Item:
    def __init__(self, value: int) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Item) and other.value == self.value

    __hash__ = object.__hash__


@pytest.fixture()
def events() -> list[tuple]:
    return []


@pytest.fixture()
def observed(events: list[tuple]) -> ObservableList:
    items = ObservableList()
    items.items_added.connect(lambda new, index: events.append(("added", list(new), index)))
    items.items_removed.connect(lambda old, index: events.append(("removed", list(old), index)))
    items.items_replaced.connect(lambda new, old, index: events.append(("replaced", list(new), list(old), index)))
    items.items_reset.connect(lambda: events.append(("reset",)))
    return items


def test_mutations_emit_matching_signals(observed: ObservableList, events: list[tuple]):
    a, b, c, d = Item(1), Item(2), Item(3), Item(4)

    observed.append(a)
    observed.extend([b, c])
    observed.insert(1, d)
    observed.remove(b)
    observed[0] = b
    observed.clear()

    assert events == [
        ("added", [a], 0),
        ("added", [b, c], 1),
        ("added", [d], 1),
        ("removed", [b], 2),
        ("replaced", [b], [a], 0),
        ("reset",),
    ]
    assert len(observed) == 0


def test_membership_uses_identity(observed: ObservableList):
    first = Item(1)
    twin = Item(1)
    observed.append(first)

    assert first in observed
    assert twin not in observed
    assert observed.index_of(twin) is None
    with pytest.raises(ValueError):
        observed.remove(twin)


def test_first_or_none(observed: ObservableList):
    observed.extend([Item(1), Item(2), Item(2)])

    match = observed.first_or_none(lambda item: item.value == 2)

    assert match is observed[1]
    assert observed.first_or_none(lambda item: item.value == 9) is None


def test_empty_extend_emits_nothing(observed: ObservableList, events: list[tuple]):
    observed.extend([])

    assert events == []


def test_handlers_see_mutated_list_and_may_mutate_it(events: list[tuple]):
    items = ObservableList([Item(1)])

    def on_added(new, index):
        events.append(("seen", len(items)))
        if len(items) < 3:
            items.append(Item(len(items) + 1))

    items.items_added.connect(on_added)
    items.append(Item(2))

    assert [item.value for item in items] == [1, 2, 3]
    assert events == [("seen", 2), ("seen", 3)]
