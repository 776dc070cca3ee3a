import pytest

from horizon.game_object import GameObject
from horizon.structs import IRect
from horizon.trigger import TriggerAction, TriggerComponent
from horizon.trigger_manager import TriggerManager


@pytest.fixture
def manager():
    TriggerManager.reset_instance()
    yield TriggerManager.instance()
    TriggerManager.reset_instance()


def make_trigger(rect, events, identifier="NoIdentifier", parent=None):
    owner = parent if parent is not None else GameObject()
    trigger = TriggerComponent(owner, rect, identifier)
    trigger.set_on_trigger_callback(
        lambda me, other, action, ident: events.append((me, other, action, ident))
    )
    return trigger


def test_len_counts_registered(manager):
    events = []
    manager.add_trigger_component(make_trigger(IRect(0, 0, 5, 5), events))
    manager.add_trigger_component(make_trigger(IRect(0, 0, 5, 5), events))
    assert len(manager) == 2


def test_clear(manager):
    manager.add_trigger_component(make_trigger(IRect(0, 0, 5, 5), []))
    manager.clear_trigger_components()
    assert len(manager) == 0


def test_overlapping_pair_notifies_both(manager):
    first_events, second_events = [], []
    first = make_trigger(IRect(0, 0, 10, 10), first_events, "first")
    second = make_trigger(IRect(5, 5, 10, 10), second_events, "second")
    manager.add_trigger_component(first)
    manager.add_trigger_component(second)
    manager.update()
    assert first_events == [(first.parent, second.parent, TriggerAction.ENTER, "second")]
    assert second_events == [(second.parent, first.parent, TriggerAction.ENTER, "first")]


def test_separate_rects_do_not_notify(manager):
    events = []
    manager.add_trigger_component(make_trigger(IRect(0, 0, 10, 10), events))
    manager.add_trigger_component(make_trigger(IRect(100, 100, 10, 10), events))
    manager.update()
    assert events == []


def test_triggers_on_same_object_are_skipped(manager):
    events = []
    owner = GameObject()
    manager.add_trigger_component(make_trigger(IRect(0, 0, 10, 10), events, parent=owner))
    manager.add_trigger_component(make_trigger(IRect(0, 0, 10, 10), events, parent=owner))
    manager.update()
    assert events == []


def test_three_triggers_each_sees_the_others(manager):
    triggers = [make_trigger(IRect(0, 0, 10, 10), []) for _ in range(3)]
    for trigger in triggers:
        manager.add_trigger_component(trigger)
    manager.update()
    assert [t.overlapping_count for t in triggers] == [len(triggers) - 1] * len(triggers)