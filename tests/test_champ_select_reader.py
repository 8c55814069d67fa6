from lcu.data.champ_select import ChampSelectSessionReader, SelectionKind


def _session(actions=None, my_team=None, cell=0):
    return {"localPlayerCellId": cell, "actions": actions or [], "myTeam": my_team or []}


def test_missing_local_cell_is_no_selection():
    status = ChampSelectSessionReader().read_status({"actions": [], "myTeam": []})
    assert status.kind is SelectionKind.NO_SELECTION


def test_unusable_payload_is_no_selection():
    reader = ChampSelectSessionReader()
    assert reader.read_status(None).kind is SelectionKind.NO_SELECTION
    assert reader.read_status(["not", "a", "session"]).kind is SelectionKind.NO_SELECTION


def test_in_progress_pick_wins_over_stale_team_champion():
    session = _session(
        actions=[[{"actorCellId": 0, "type": "pick", "isInProgress": True, "completed": False, "championId": 0}]],
        my_team=[{"cellId": 0, "championId": 157}],
    )

    status = ChampSelectSessionReader().read_status(session)

    assert status.kind is SelectionKind.PICK_IN_PROGRESS
    assert not status.is_locked


def test_in_progress_wins_over_older_completed_action():
    session = _session(actions=[
        [{"actorCellId": 0, "type": "pick", "completed": True, "championId": 64}],
        [{"actorCellId": 0, "type": "pick", "isInProgress": True, "championId": 0}],
    ])
    assert ChampSelectSessionReader().read_status(session).kind is SelectionKind.PICK_IN_PROGRESS


def test_completed_pick_locks_champion():
    session = _session(actions=[
        [{"actorCellId": 0, "type": "ban", "completed": True, "championId": 17}],
        [{"actorCellId": 3, "type": "pick", "completed": True, "championId": 99}],
        [{"actorCellId": 0, "type": "pick", "completed": True, "championId": 89}],
    ])

    status = ChampSelectSessionReader().read_status(session)

    assert status.is_locked
    assert status.champion_id == 89


def test_completed_pick_with_zero_champion_falls_through_to_team():
    session = _session(
        actions=[[{"actorCellId": 0, "type": "pick", "completed": True, "championId": 0}]],
        my_team=[{"cellId": 0, "championId": 22}],
    )
    assert ChampSelectSessionReader().read_status(session).champion_id == 22


def test_aram_assignment_from_team_only():
    session = _session(cell=2, my_team=[
        {"cellId": 1, "championId": 11},
        {"cellId": 2, "championId": 222},
    ])

    status = ChampSelectSessionReader().read_status(session)

    assert status.is_locked
    assert status.champion_id == 222


def test_nothing_assigned_is_no_selection():
    session = _session(my_team=[{"cellId": 0, "championId": 0}])
    assert ChampSelectSessionReader().read_status(session).kind is SelectionKind.NO_SELECTION


def test_swift_candidates_prefer_player_selections():
    gameflow = {"gameData": {
        "playerChampionSelections": [
            {"summonerId": 7, "championIds": [1, 2]},
            {"summonerId": 42, "championIds": [103, 0, 103, 51]},
        ],
        "selectedChampions": [{"championId": 300}],
    }}

    candidates = ChampSelectSessionReader().swift_play_candidates(gameflow, local_summoner_id="42")

    assert candidates == [103, 51]


def test_swift_candidates_use_local_player_selection_when_no_id_given():
    gameflow = {
        "localPlayerSelection": {"summonerId": 42},
        "gameData": {"playerChampionSelections": [{"summonerId": 42, "championIds": [5]}]},
    }
    assert ChampSelectSessionReader().swift_play_candidates(gameflow) == [5]


def test_swift_candidates_fall_back_to_selected_champions():
    gameflow = {"gameData": {"selectedChampions": [{"championId": 3}, {"championId": -1}, {"championId": 4}]}}
    assert ChampSelectSessionReader().swift_play_candidates(gameflow, local_summoner_id="42") == [3, 4]


def test_swift_candidates_from_team_secondary_champion():
    champ_select = {"localPlayerCellId": 1, "myTeam": [
        {"cellId": 0, "championId": 8},
        {"cellId": 1, "championId": 25, "secondaryChampionId": 26},
    ]}
    assert ChampSelectSessionReader().swift_play_candidates({}, champ_select) == [25, 26]


def test_swift_candidates_from_lobby_player_slots():
    lobby = {"localMember": {"playerSlots": [{"championId": 60}, {"championId": 60}, {"championId": 0}]}}
    assert ChampSelectSessionReader().swift_play_candidates(None, None, lobby) == [60]


def test_swift_candidates_empty_when_nothing_known():
    assert ChampSelectSessionReader().swift_play_candidates() == []
