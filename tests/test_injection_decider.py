from lcu.features.lcu_game_mode import GameModeKind
from party.config import PartyModeConfig
from state import ReceivedShareCache
from threads.handlers.injection_decider import InjectionDecider

from conftest import StaticConfig

NOW = 1_700_000_000.0


class Clock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _decider(cache=None, clock=None):
    cache = cache or ReceivedShareCache(clock=lambda: NOW)
    return InjectionDecider(cache, max_share_age_secs=300, min_interval_s=5.0, clock=clock or Clock(100.0)), cache


def test_signature_ignores_insertion_order():
    first = ReceivedShareCache(clock=lambda: NOW)
    first.put("A", 89, 1, received_at=NOW)
    first.put("B", 61, 3, 7, received_at=NOW)
    second = ReceivedShareCache(clock=lambda: NOW)
    second.put("B", 61, 3, 7, received_at=NOW)
    second.put("A", 89, 1, received_at=NOW)

    sig_a = InjectionDecider(first).compute_signature(89)
    sig_b = InjectionDecider(second).compute_signature(89)

    assert sig_a == sig_b
    assert sig_a == "champion:89|A:89:1:0|B:61:3:7"


def test_signature_changes_with_shares_and_champion():
    decider, cache = _decider()
    empty = decider.compute_signature(89)
    assert empty == "champion:89"

    cache.put("A", 89, 1, received_at=NOW)
    with_share = decider.compute_signature(89)
    assert with_share != empty
    assert decider.compute_signature(90) != with_share

    cache.put("A", 89, 2, received_at=NOW)
    assert decider.compute_signature(89) != with_share


def test_no_local_champion_never_injects():
    decider, cache = _decider()
    cache.put("A", 89, 1, received_at=NOW)
    assert not decider.should_inject_now(0, GameModeKind.DRAFT)
    assert not decider.should_inject_now(-1, GameModeKind.ARAM, {"A"})


def test_no_shares_does_not_inject_when_friends_expected():
    decider, _ = _decider()
    assert not decider.should_inject_now(89, GameModeKind.DRAFT)
    assert not decider.should_inject_now(89, GameModeKind.DRAFT, {"A"})


def test_no_sharing_friends_in_party_injects_local_only():
    decider, _ = _decider()
    assert decider.should_inject_now(89, GameModeKind.DRAFT, set())


def test_aram_partial_participation_is_enough():
    decider, cache = _decider()
    cache.put("B", 22, 5, received_at=NOW)

    assert decider.should_inject_now(89, GameModeKind.ARAM, {"A", "B", "C"})


def test_draft_partial_participation_is_enough_too():
    decider, cache = _decider()
    cache.put("B", 22, 5, received_at=NOW)

    assert decider.should_inject_now(89, GameModeKind.DRAFT, {"A", "B"})


def test_shares_from_outside_the_party_do_not_count():
    decider, cache = _decider()
    cache.put("Z", 22, 5, received_at=NOW)

    assert not decider.should_inject_now(89, GameModeKind.DRAFT, {"A"})


def test_expired_shares_are_ignored():
    decider, cache = _decider()
    cache.put("A", 22, 5, received_at=NOW - 301)

    assert not decider.should_inject_now(89, GameModeKind.DRAFT)


def test_evaluate_fires_once_until_reset():
    clock = Clock(100.0)
    decider, cache = _decider(clock=clock)
    cache.put("A", 22, 5, received_at=NOW)

    request = decider.evaluate(89, GameModeKind.DRAFT, {"A"})
    assert request is not None
    assert request.champion_id == 89
    assert request.friend_ids == ("A",)
    assert decider.fired

    cache.put("B", 61, 1, received_at=NOW)
    clock.now += 60
    assert decider.evaluate(89, GameModeKind.DRAFT, {"A", "B"}) is None

    decider.reset()
    assert not decider.fired
    assert decider.evaluate(89, GameModeKind.DRAFT, {"A", "B"}) is not None


def test_evaluate_respects_min_interval_after_reset():
    clock = Clock(100.0)
    decider, cache = _decider(clock=clock)
    cache.put("A", 22, 5, received_at=NOW)

    assert decider.evaluate(89, GameModeKind.DRAFT) is not None
    decider.reset()
    clock.now += 1
    assert decider.evaluate(90, GameModeKind.DRAFT) is None
    clock.now += 5
    assert decider.evaluate(90, GameModeKind.DRAFT) is not None


def test_evaluate_without_decision_does_not_latch():
    decider, cache = _decider()

    assert decider.evaluate(89, GameModeKind.DRAFT, {"A"}) is None
    assert not decider.fired

    cache.put("A", 22, 5, received_at=NOW)
    assert decider.evaluate(89, GameModeKind.DRAFT, {"A"}) is not None


def test_evaluate_prunes_expired_entries():
    decider, cache = _decider()
    cache.put("A", 22, 5, received_at=NOW - 400)

    decider.evaluate(89, GameModeKind.DRAFT)

    assert len(cache) == 0


def test_share_ttl_follows_config_reload():
    cfg = PartyModeConfig(max_share_age_secs=300)
    cache = ReceivedShareCache(clock=lambda: NOW)
    cache.put("A", 22, 5, received_at=NOW - 200)
    decider = InjectionDecider(cache, StaticConfig(cfg))

    assert decider.share_ttl() == 300
    assert len(decider.valid_shares()) == 1

    cfg.max_share_age_secs = 100
    assert decider.share_ttl() == 100
    assert decider.valid_shares() == []
    assert not decider.should_inject_now(89, GameModeKind.DRAFT)


def test_command_line_ttl_overrides_config():
    decider = InjectionDecider(ReceivedShareCache(), StaticConfig(PartyModeConfig(max_share_age_secs=300)),
                               max_share_age_secs=60)
    assert decider.share_ttl() == 60


def test_forced_evaluate_skips_share_check_only():
    clock = Clock(100.0)
    decider, _ = _decider(clock=clock)

    assert decider.evaluate(0, GameModeKind.SWIFT_PLAY, {"A"}, force=True) is None

    request = decider.evaluate(89, GameModeKind.SWIFT_PLAY, {"A"}, champion_ids=[89, 61], force=True)
    assert request is not None
    assert request.champion_ids == (89, 61)
    assert request.shares == ()

    assert decider.evaluate(89, GameModeKind.SWIFT_PLAY, {"A"}, force=True) is None


def test_request_defaults_to_local_champion():
    decider, cache = _decider()
    cache.put("A", 22, 5, received_at=NOW)

    assert decider.evaluate(89, GameModeKind.DRAFT).champion_ids == (89,)
