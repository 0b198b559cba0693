"""
Tests for suspense mode and pause flags
"""
from scoreboard.session import GameSession


def test_initial_state():
    state = GameSession().get_state()
    assert state.suspense_mode is False
    assert state.pause_until is None
    assert state.to_wire() == {"suspenseMode": False, "pauseUntil": None}


def test_suspense_coerced_to_bool():
    session = GameSession()
    assert session.set_suspense_mode("yes").suspense_mode is True
    assert session.set_suspense_mode(0).suspense_mode is False
    assert session.set_suspense_mode(None).suspense_mode is False
    assert session.set_suspense_mode(True).suspense_mode is True


def test_pause_stored_verbatim_then_cleared():
    session = GameSession()
    session.set_pause("2024-01-01T10:00:00Z")
    assert session.get_state().pause_until == "2024-01-01T10:00:00Z"

    session.set_pause("")
    assert session.get_state().pause_until is None


def test_pause_not_validated():
    session = GameSession()
    assert session.set_pause("after lunch").pause_until == "after lunch"


def test_pause_cleared_by_blank_or_non_string():
    session = GameSession()
    for value in ("   ", None, 42):
        session.set_pause("2024-01-01T10:00:00Z")
        assert session.set_pause(value).pause_until is None


def test_get_state_returns_copy():
    session = GameSession()
    state = session.get_state()
    state.suspense_mode = True
    assert session.get_state().suspense_mode is False


def test_suspense_empty_containers_are_true():
    """Empty arrays and objects switch suspense on, as in the browser client"""
    session = GameSession()
    assert session.set_suspense_mode([]).suspense_mode is True
    session.set_suspense_mode(False)
    assert session.set_suspense_mode({}).suspense_mode is True
    assert session.set_suspense_mode("").suspense_mode is False
