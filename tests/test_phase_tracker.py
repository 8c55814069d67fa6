from state.phase_tracker import Phase, PhaseTracker


def test_phase_mapping():
    assert Phase.from_gameflow("ChampSelect") is Phase.CHAMP_SELECT
    assert Phase.from_gameflow("InProgress") is Phase.OTHER
    assert Phase.from_gameflow("None") is Phase.OTHER
    assert Phase.from_gameflow("") is Phase.UNKNOWN
    assert Phase.from_gameflow(None) is Phase.UNKNOWN


def test_update_reports_only_coarse_changes():
    tracker = PhaseTracker()
    assert tracker.current is Phase.UNKNOWN

    change = tracker.update("Lobby")
    assert change.previous is Phase.UNKNOWN
    assert change.current is Phase.OTHER

    assert tracker.update("Matchmaking") is None
    assert tracker.raw_phase == "Matchmaking"

    change = tracker.update("ChampSelect")
    assert change.entered_champ_select
    assert not change.left_champ_select
    assert tracker.is_champ_select()

    change = tracker.update("InProgress")
    assert change.left_champ_select
    assert not tracker.is_champ_select()
