import pytest

from horizon.events import Event, Observer, PossibleEvent
from horizon.score import ScoreComponent


class RecordingObserver(Observer):
    def __init__(self):
        self.events = []

    def on_notify(self, event):
        self.events.append(event)


def test_starts_at_zero():
    assert ScoreComponent(None).score == 0


@pytest.mark.parametrize(
    "increase, expected_event",
    [
        (25, PossibleEvent.COLOR_CHANGE),
        (50, PossibleEvent.REMAINING_DISC),
        (300, PossibleEvent.CATCHING_SAM_OR_SLICK),
        (500, PossibleEvent.DEFEAT_COILY),
        (10, PossibleEvent.PREVIOUS_LEVEL_DATA),
    ],
)
def test_increase_sends_matching_event(increase, expected_event):
    score = ScoreComponent(None)
    observer = RecordingObserver()
    score.add_observer(observer)
    score.increase_score(increase)
    assert score.score == increase
    assert observer.events == [Event(expected_event, increase)]


def test_score_accumulates_and_event_carries_total():
    score = ScoreComponent(None)
    observer = RecordingObserver()
    score.add_observer(observer)
    score.increase_score(25)
    score.increase_score(500)
    assert score.score == 25 + 500
    assert [e.data for e in observer.events] == [25, 25 + 500]