from datetime import datetime

from schemas.message_schema import MessageOut, sort_newest_first


def _msg(message_id, date_sent):
    return MessageOut(
        message_id=message_id, sender="Charles", recipient="Rick", subject="", body="",
        read_status=False, deleted_for_sender=False, deleted_for_recipient=False,
        date_sent=date_sent,
    )


def test_sort_newest_first():
    a = _msg(1, datetime(2024, 1, 1, 9, 0))
    b = _msg(2, datetime(2024, 3, 1, 9, 0))
    c = _msg(3, datetime(2024, 3, 1, 9, 0))

    assert [m.message_id for m in sort_newest_first([a, b, c])] == [3, 2, 1]


def test_date_sent_display():
    assert _msg(1, datetime(2024, 5, 17, 8, 4, 59)).date_sent_display == "2024-05-17 08:04"
