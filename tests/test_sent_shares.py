from state.sent_shares import SentShareDeduper, share_signature


def test_was_sent_follows_mark_and_clear():
    deduper = SentShareDeduper()
    sig = share_signature("1001", 89, 89001, 89002)

    assert not deduper.was_sent(sig)
    deduper.mark_sent(sig)
    assert deduper.was_sent(sig)
    assert deduper.was_sent(sig)

    deduper.clear()
    assert not deduper.was_sent(sig)


def test_signature_trims_friend_and_defaults_chroma():
    assert share_signature(" 1001 ", 89, 89001) == "1001_89_89001_0"
    assert share_signature(1001, 89, 89001, None) == share_signature("1001", 89, 89001, 0)


def test_signatures_differ_per_skin_and_chroma():
    deduper = SentShareDeduper()
    deduper.mark_sent(share_signature("1001", 89, 1))

    assert not deduper.was_sent(share_signature("1001", 89, 2))
    assert not deduper.was_sent(share_signature("1001", 89, 1, 7))
    assert not deduper.was_sent(share_signature("1002", 89, 1))
    assert len(deduper) == 1
