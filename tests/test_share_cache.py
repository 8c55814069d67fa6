from state.share_cache import ReceivedShareCache, timestamp_to_seconds


def test_repeated_puts_keep_one_entry_per_key():
    cache = ReceivedShareCache()
    for skin in (1, 2, 3, 4):
        cache.put("A", 89, skin, received_at=1000)

    assert len(cache) == 1
    assert cache.get("A", 89).skin_id == 4


def test_friend_shares_two_champions():
    cache = ReceivedShareCache()
    t0 = 1_700_000_000_000
    cache.put("A", 89, 1, received_at=t0)
    cache.put("A", 61, 3, received_at=t0 + 3000)

    assert len(cache) == 2
    assert cache.get("A", 89).skin_id == 1
    assert cache.get("A", 61).skin_id == 3


def test_reshare_same_champion_overwrites():
    cache = ReceivedShareCache()
    cache.put("B", 238, 15, received_at=1000)
    cache.put("B", 238, 20, received_at=1001)

    shares = cache.values()
    assert len(shares) == 1
    assert shares[0].from_summoner_id == "B"
    assert shares[0].skin_id == 20


def test_friend_id_is_trimmed():
    cache = ReceivedShareCache()
    cache.put(" 42 ", 1, 5, received_at=10)
    cache.put(42, 1, 6, received_at=11)

    assert len(cache) == 1
    assert cache.get("42", 1).skin_id == 6


def test_prune_boundary_in_seconds():
    cache = ReceivedShareCache()
    now = 10_000
    cache.put("A", 1, 1, received_at=now - 300)
    cache.put("B", 1, 1, received_at=now - 301)

    removed = cache.prune(300, now=now)

    assert removed == 1
    assert cache.get("A", 1) is not None
    assert cache.get("B", 1) is None


def test_prune_boundary_with_millisecond_timestamps():
    cache = ReceivedShareCache()
    now_ms = 1_700_000_000_000
    cache.put("A", 1, 1, received_at=now_ms - 300_000)
    cache.put("B", 1, 1, received_at=now_ms - 301_000)

    cache.prune(300, now=now_ms / 1000)

    assert cache.friends_who_shared() == {"A"}


def test_values_filters_by_age_without_mutating():
    cache = ReceivedShareCache(clock=lambda: 5000)
    cache.put("A", 1, 1, received_at=4900)
    cache.put("B", 2, 2, received_at=1000)

    assert [s.from_summoner_id for s in cache.values(max_age_secs=300)] == ["A"]
    assert len(cache) == 2


def test_clear_drops_everything():
    cache = ReceivedShareCache()
    cache.put("A", 1, 1)
    cache.put("B", 2, 2)
    cache.clear()
    assert len(cache) == 0


def test_timestamp_normalization():
    assert timestamp_to_seconds(1_700_000_000) == 1_700_000_000
    assert timestamp_to_seconds(1_700_000_000_000) == 1_700_000_000
