from state import ReceivedShareCache, SentShareDeduper, SessionRegistry
from state.session_registry import derive_session_id, extract_game_id


def _registry(fetch=None, now=1_000_000.0):
    received = ReceivedShareCache()
    sent = SentShareDeduper()
    clock = {"now": now}
    registry = SessionRegistry(received, sent, fetch, bucket_secs=600, clock=lambda: clock["now"])
    return registry, received, sent, clock


def _fill(received, sent):
    received.put("A", 89, 1, received_at=1)
    sent.mark_sent("A_89_1_0")


def test_derive_session_id():
    assert derive_session_id({"gameId": 55}, 0) == "game:55"
    assert derive_session_id({"gameData": {"gameId": "77"}}, 0) == "game:77"
    assert derive_session_id({"gameId": 0}, 1250, bucket_secs=600) == "bucket:1200"
    assert extract_game_id("nope") is None


def test_first_observation_clears_caches():
    registry, received, sent, _ = _registry()
    _fill(received, sent)

    assert registry.observe({"gameData": {"gameId": 1}})
    assert registry.session_id == "game:1"
    assert len(received) == 0
    assert len(sent) == 0


def test_same_game_keeps_caches():
    registry, received, sent, _ = _registry()
    registry.observe({"gameData": {"gameId": 1}})
    _fill(received, sent)

    assert not registry.observe({"gameData": {"gameId": 1}})
    assert len(received) == 1
    assert len(sent) == 1


def test_game_change_clears_both_caches():
    registry, received, sent, _ = _registry()
    registry.observe({"gameData": {"gameId": 1}})
    _fill(received, sent)

    assert registry.observe({"gameData": {"gameId": 2}})
    assert registry.session_id == "game:2"
    assert len(received) == 0
    assert not sent.was_sent("A_89_1_0")


def test_bucket_rollover_keeps_caches():
    registry, received, sent, clock = _registry(now=1190.0)
    registry.observe({})
    _fill(received, sent)

    clock["now"] = 1210.0
    assert not registry.observe({})
    assert registry.session_id == "bucket:600"
    assert len(received) == 1


def test_bucket_to_game_clears():
    registry, received, sent, _ = _registry()
    registry.observe({})
    _fill(received, sent)

    assert registry.observe({"gameData": {"gameId": 9}})
    assert len(received) == 0


def test_failed_refresh_leaves_session():
    responses = [{"gameData": {"gameId": 3}}, None]
    registry, received, sent, _ = _registry(fetch=lambda: responses.pop(0))

    assert registry.refresh() == {"gameData": {"gameId": 3}}
    _fill(received, sent)

    assert registry.refresh() is None
    assert registry.session_id == "game:3"
    assert len(received) == 1
