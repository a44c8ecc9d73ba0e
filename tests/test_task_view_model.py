from __future__ import annotations

from playermarkers.app.task_vm import HAS_CONTINENT_LOCATION
from playermarkers.model.task import PlayerTask, Point


def _record(task_vm) -> list[str]:
    changes: list[str] = []
    task_vm.property_changed.connect(lambda sender, name: changes.append(name))
    return changes


def test_location_toggle_emits_has_continent_location(make_task):
    task_vm = make_task("a")
    changes = _record(task_vm)

    task_vm.continent_location = Point(1, 1)
    task_vm.continent_location = Point(2, 2)
    task_vm.continent_location = None

    assert changes == [
        "continent_location", HAS_CONTINENT_LOCATION,
        "continent_location",
        "continent_location", HAS_CONTINENT_LOCATION,
    ]


def test_setting_same_value_emits_nothing(make_task):
    task_vm = make_task("a", Point(1, 1), name="Same")
    changes = _record(task_vm)

    task_vm.name = "Same"
    task_vm.continent_location = Point(1, 1)

    assert changes == []


def test_sender_is_the_view_model(make_task):
    task_vm = make_task("a")
    senders = []
    task_vm.property_changed.connect(lambda sender, name: senders.append(sender))

    task_vm.description = "Gather ore"

    assert senders == [task_vm]
    assert task_vm.task.description == "Gather ore"


def test_task_dict_defaults():
    task = PlayerTask.from_dict({"id": 42})

    assert task.id == "42"
    assert task.continent_location is None
    assert not task.has_continent_location
    assert task.to_dict()["location"] is None
