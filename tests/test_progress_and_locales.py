import pytest

from storyteller.locales import (
    ERROR_MESSAGES,
    LANGUAGE_NAMES,
    Locale,
    error_message,
    is_rtl,
    language_name,
    list_locales,
    resolve_locale,
)
from storyteller.progress import InvalidTransitionError, LoadingState, ProgressTracker


def test_nine_locales_each_with_name_and_error_text():
    assert len(Locale) == 9
    assert set(LANGUAGE_NAMES) == set(Locale)
    assert set(ERROR_MESSAGES) == set(Locale)
    assert language_name("fa") == "Persian"


def test_resolve_locale_falls_back_to_english():
    assert resolve_locale("KO") is Locale.KO
    assert resolve_locale(Locale.HE) is Locale.HE
    assert resolve_locale("de") is Locale.EN
    assert resolve_locale(None) is Locale.EN


def test_rtl_locales():
    assert [entry["code"] for entry in list_locales() if entry["rtl"]] == ["ar", "he", "fa"]
    assert is_rtl("he")
    assert not is_rtl("en")


def test_error_message_is_localized():
    assert error_message("en") != error_message("ja")
    assert error_message("unknown") == error_message("en")


def test_tracker_notifies_listeners_in_order():
    tracker = ProgressTracker()
    seen = []
    tracker.subscribe(lambda prev, cur: seen.append((prev.value, cur.value)))

    for state in (LoadingState.RESEARCHING, LoadingState.PLANNING, LoadingState.SCOUTING, LoadingState.COMPLETE):
        tracker.transition(state)

    assert seen == [
        ("idle", "researching"),
        ("researching", "planning"),
        ("planning", "scouting"),
        ("scouting", "complete"),
    ]


@pytest.mark.parametrize("path", [
    [LoadingState.RESEARCHING],
    [LoadingState.RESEARCHING, LoadingState.PLANNING],
    [LoadingState.RESEARCHING, LoadingState.PLANNING, LoadingState.SCOUTING],
])
def test_error_reachable_from_every_in_progress_state(path):
    tracker = ProgressTracker()
    for state in path:
        tracker.transition(state)
    assert tracker.in_progress
    tracker.transition(LoadingState.ERROR)
    assert tracker.state is LoadingState.ERROR
    assert not tracker.in_progress


def test_tracker_rejects_skipping_stages():
    tracker = ProgressTracker()
    with pytest.raises(InvalidTransitionError):
        tracker.transition(LoadingState.COMPLETE)
    with pytest.raises(InvalidTransitionError):
        tracker.transition(LoadingState.DIETARY_LOADING)
    assert tracker.state is LoadingState.IDLE


def test_dietary_loading_is_entered_only_from_complete():
    tracker = ProgressTracker()
    for state in (LoadingState.RESEARCHING, LoadingState.PLANNING, LoadingState.SCOUTING, LoadingState.COMPLETE):
        tracker.transition(state)
    tracker.transition(LoadingState.DIETARY_LOADING)
    assert tracker.state.value == "dietary-loading"
    tracker.transition(LoadingState.COMPLETE)
    assert tracker.state is LoadingState.COMPLETE


def test_unsubscribe_and_failing_listener():
    tracker = ProgressTracker()
    seen = []

    def broken(prev, cur):
        raise RuntimeError("ui went away")

    tracker.subscribe(broken)
    unsubscribe = tracker.subscribe(lambda prev, cur: seen.append(cur))
    tracker.transition(LoadingState.RESEARCHING)
    unsubscribe()
    tracker.transition(LoadingState.PLANNING)

    assert seen == [LoadingState.RESEARCHING]
    assert tracker.state is LoadingState.PLANNING


def test_reset_returns_to_idle():
    tracker = ProgressTracker()
    tracker.transition(LoadingState.RESEARCHING)
    tracker.transition(LoadingState.ERROR)
    tracker.reset()
    assert tracker.state is LoadingState.IDLE


def test_reset_notifies_listeners():
    tracker = ProgressTracker()
    seen = []
    tracker.subscribe(lambda prev, cur: seen.append((prev.value, cur.value)))
    for state in (LoadingState.RESEARCHING, LoadingState.PLANNING, LoadingState.SCOUTING, LoadingState.COMPLETE):
        tracker.transition(state)

    tracker.reset()

    assert seen[-1] == ("complete", "idle")
    assert tracker.history[-1] is LoadingState.IDLE


def test_reset_refused_while_in_progress():
    tracker = ProgressTracker()
    tracker.transition(LoadingState.RESEARCHING)
    seen = []
    tracker.subscribe(lambda prev, cur: seen.append(cur))

    with pytest.raises(InvalidTransitionError):
        tracker.reset()

    assert tracker.state is LoadingState.RESEARCHING
    assert seen == []
    tracker.transition(LoadingState.PLANNING)
