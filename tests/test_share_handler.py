from lcu.features.lcu_party_chat import InboundMessage
from party.config import LocalSkinSelection, PairedFriend, PartyModeConfig
from party.protocol import PartyModeMessage, SkinShare
from state import SharedState
from threads.handlers.share_handler import ShareHandler, summoner_display_name

from conftest import FakeChat, StaticConfig

NOW_S = 1_700_000_000.0
NOW_MS = int(NOW_S * 1000)


class FakeLCU:
    def __init__(self, summoner=None):
        self.current_summoner = summoner if summoner is not None else {"summonerId": 1, "displayName": "Me"}


def _config(**kwargs):
    cfg = PartyModeConfig(
        paired_friends=[PairedFriend("1001", "Alice"), PairedFriend("1002", "Bob")],
        skins={89: LocalSkinSelection(89, 89001, "Leona skin", chroma_id=89010)},
    )
    for key, value in kwargs.items():
        setattr(cfg, key, value)
    return cfg


def _handler(cfg=None, chat=None, state=None, monotonic=None):
    return ShareHandler(
        FakeLCU(), chat or FakeChat(), state or SharedState(), StaticConfig(cfg or _config()),
        clock=lambda: NOW_S, monotonic=monotonic or (lambda: 50.0),
    )


def _inbound(sender="1001", champion=61, skin=61003, timestamp=NOW_MS, seq=1, mid="m1"):
    share = SkinShare(sender, "Alice", champion, skin, timestamp=timestamp)
    message = PartyModeMessage("skin_share", share.to_dict(), 2, seq, 7)
    return InboundMessage(mid, "conv", sender, timestamp, message)


def test_display_name_fallbacks():
    assert summoner_display_name({"displayName": "D"}) == "D"
    assert summoner_display_name({"gameName": "G", "tagLine": "EUW"}) == "G#EUW"
    assert summoner_display_name({}) == "Unknown"


def test_inbound_share_is_cached():
    handler = _handler()

    stored = handler.handle_inbound(_inbound())

    assert stored is not None
    assert handler.state.received_shares.get("1001", 61).skin_id == 61003


def test_poll_inbound_counts_stored_shares():
    chat = FakeChat()
    chat.inbound = [_inbound(mid="m1", seq=1), _inbound(mid="m2", seq=2, skin=61004)]
    handler = _handler(chat=chat)

    assert handler.poll_inbound() == 2
    assert len(handler.state.received_shares) == 1
    assert handler.state.received_shares.get("1001", 61).skin_id == 61004


def test_own_share_is_ignored():
    handler = _handler()
    assert handler.handle_inbound(_inbound(sender="1")) is None


def test_unpaired_sender_is_ignored():
    handler = _handler()
    assert handler.handle_inbound(_inbound(sender="9999")) is None


def test_replayed_sequence_is_ignored():
    handler = _handler()
    assert handler.handle_inbound(_inbound(seq=3)) is not None
    handler.state.received_shares.clear()
    assert handler.handle_inbound(_inbound(seq=3, mid="m2")) is None


def test_share_sent_before_champ_select_is_stale():
    state = SharedState()
    state.champ_select_started_ms = NOW_MS - 1000
    handler = _handler(state=state)

    assert handler.handle_inbound(_inbound(timestamp=NOW_MS - 5000)) is None
    assert handler.handle_inbound(_inbound(timestamp=NOW_MS - 500, seq=2)) is not None


def test_share_older_than_max_age_is_stale():
    handler = _handler(cfg=_config(max_share_age_secs=300))
    assert handler.handle_inbound(_inbound(timestamp=NOW_MS - 301_000)) is None


def test_malformed_share_payload_is_dropped():
    handler = _handler()
    bad = InboundMessage("m1", "conv", "1001", NOW_MS, PartyModeMessage("skin_share", {"champion_id": 1}))
    assert handler.handle_inbound(bad) is None
    assert len(handler.state.received_shares) == 0


def test_locked_champion_is_shared_once_per_friend():
    chat = FakeChat()
    clock = {"now": 50.0}
    handler = _handler(chat=chat, monotonic=lambda: clock["now"])

    assert handler.share_locked_champion(89, {"1001", "1002", "5555"}) == 2
    assert sorted(friend for friend, _ in chat.sent) == ["1001", "1002"]
    payload = chat.sent[0][1].data
    assert payload["skin_id"] == 89001
    assert payload["chroma_id"] == 89010
    assert payload["from_summoner_id"] == "1"

    clock["now"] += 10
    assert handler.share_locked_champion(89, {"1001", "1002"}) == 0
    assert len(chat.sent) == 2


def test_failed_send_is_retried_later():
    chat = FakeChat(failing={"1002"})
    clock = {"now": 50.0}
    handler = _handler(chat=chat, monotonic=lambda: clock["now"])

    assert handler.share_locked_champion(89) == 1

    chat.failing.clear()
    clock["now"] += 1
    assert handler.share_locked_champion(89) == 0  # debounced
    clock["now"] += 2
    assert handler.share_locked_champion(89) == 1
    assert [friend for friend, _ in chat.sent] == ["1001", "1002"]


def test_nothing_shared_without_selection_or_when_disabled():
    chat = FakeChat()
    assert _handler(chat=chat).share_locked_champion(12) == 0
    assert _handler(cfg=_config(enabled=False), chat=chat).share_locked_champion(89) == 0
    assert chat.sent == []


def test_friends_with_sharing_disabled_are_skipped():
    cfg = _config(paired_friends=[PairedFriend("1001", share_enabled=False), PairedFriend("1002")])
    chat = FakeChat()

    assert _handler(cfg=cfg, chat=chat).share_locked_champion(89) == 1
    assert chat.sent[0][0] == "1002"
