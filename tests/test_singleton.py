from horizon.timer import Timer
from horizon.trigger_manager import TriggerManager


def test_instance_is_shared():
    TriggerManager.reset_instance()
    manager = TriggerManager.instance()
    manager.add_trigger_component(object())
    assert len(TriggerManager.instance()) == 1
    TriggerManager.reset_instance()


def test_reset_creates_new_instance():
    TriggerManager.reset_instance()
    TriggerManager.instance().add_trigger_component(object())
    TriggerManager.reset_instance()
    assert len(TriggerManager.instance()) == 0


def test_subclasses_have_separate_instances():
    TriggerManager.reset_instance()
    Timer.reset_instance()
    TriggerManager.instance().add_trigger_component(object())
    assert len(TriggerManager.instance()) == 1
    assert Timer.instance().fps == 0
    assert isinstance(Timer.instance(), Timer)
    assert isinstance(TriggerManager.instance(), TriggerManager)
    TriggerManager.reset_instance()
    Timer.reset_instance()