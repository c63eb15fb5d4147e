"""Tests for MessageScheduler stepping, conditions and reply windows."""
from __future__ import annotations

from mirrorline.messages import Message, MessageScheduler

GAME = object()


def _run(scheduler, script, ticks, reply_held=False):
    return [scheduler.update(script, GAME, reply_held) for _ in range(ticks)]


class TestDisplay:
    def test_no_script_is_noop(self):
        scheduler = MessageScheduler(reply_timeout=3)
        assert scheduler.update(None, GAME, False) is None
        assert scheduler.update([], GAME, False) is None
        assert scheduler.cursor.index == 0

    def test_undelayed_message_shows_immediately(self):
        scheduler = MessageScheduler(reply_timeout=3)
        script = [Message("hello"), Message("world")]
        assert _run(scheduler, script, 3) == ["hello", "world", None]
        assert scheduler.finished(script)

    def test_delay_waits_that_many_ticks(self):
        scheduler = MessageScheduler(reply_timeout=3)
        script = [Message("late", delay=3)]
        assert _run(scheduler, script, 4) == [None, None, None, "late"]
        assert scheduler.cursor.wait_ticks == 0

    def test_each_message_waits_its_own_delay(self):
        scheduler = MessageScheduler(reply_timeout=3)
        script = [Message("a", delay=1), Message("b", delay=2)]
        assert _run(scheduler, script, 5) == [None, "a", None, None, "b"]


class TestConditions:
    def test_false_condition_is_skipped_without_display(self):
        scheduler = MessageScheduler(reply_timeout=3)
        script = [Message("hidden", condition=lambda g: False), Message("shown")]
        assert scheduler.update(script, GAME, False) is None
        assert scheduler.cursor.index == 1
        assert scheduler.update(script, GAME, False) == "shown"

    def test_condition_receives_the_game(self):
        scheduler = MessageScheduler(reply_timeout=3)
        seen = []

        def check(game):
            seen.append(game)
            return True

        scheduler.update([Message("x", condition=check)], GAME, False)
        assert seen == [GAME]

    def test_true_condition_is_rechecked_while_waiting(self):
        scheduler = MessageScheduler(reply_timeout=3)
        state = {"ok": True}
        script = [Message("x", condition=lambda g: state["ok"], delay=5)]
        _run(scheduler, script, 2)
        state["ok"] = False
        assert scheduler.update(script, GAME, False) is None
        assert scheduler.finished(script)


class TestReplies:
    SCRIPT = [Message("question", await_reply=True), Message("next", delay=100)]

    def test_below_threshold_never_replies(self):
        scheduler = MessageScheduler(reply_timeout=3)
        _run(scheduler, self.SCRIPT, 1)
        _run(scheduler, self.SCRIPT, 3, reply_held=True)
        assert scheduler.cursor.reply_ticks == 3
        assert not scheduler.cursor.has_replied
        assert scheduler.reply_count == 0

    def test_exceeding_threshold_replies_once(self):
        scheduler = MessageScheduler(reply_timeout=3)
        _run(scheduler, self.SCRIPT, 1)
        _run(scheduler, self.SCRIPT, 4, reply_held=True)
        assert scheduler.cursor.has_replied
        assert scheduler.reply_count == 1

        _run(scheduler, self.SCRIPT, 10, reply_held=True)
        assert scheduler.reply_count == 1

    def test_release_resets_reply_counter(self):
        scheduler = MessageScheduler(reply_timeout=3)
        _run(scheduler, self.SCRIPT, 1)
        _run(scheduler, self.SCRIPT, 3, reply_held=True)
        _run(scheduler, self.SCRIPT, 1, reply_held=False)
        assert scheduler.cursor.reply_ticks == 0
        _run(scheduler, self.SCRIPT, 3, reply_held=True)
        assert scheduler.reply_count == 0

    def test_holding_without_pending_reply_does_nothing(self):
        scheduler = MessageScheduler(reply_timeout=0)
        script = [Message("plain"), Message("next", delay=10)]
        _run(scheduler, script, 5, reply_held=True)
        assert scheduler.reply_count == 0

    def test_reply_flag_cleared_when_next_message_shows(self):
        scheduler = MessageScheduler(reply_timeout=1)
        script = [Message("q", await_reply=True), Message("a", delay=4)]
        results = _run(scheduler, script, 6, reply_held=True)
        assert results[-1] == "a"
        assert scheduler.reply_count == 1
        assert not scheduler.cursor.has_replied

    def test_reset_keeps_reply_count(self):
        scheduler = MessageScheduler(reply_timeout=0)
        _run(scheduler, self.SCRIPT, 1)
        _run(scheduler, self.SCRIPT, 1, reply_held=True)
        assert scheduler.reply_count == 1
        scheduler.reset()
        assert scheduler.cursor.index == 0
        assert not scheduler.cursor.has_replied
        assert scheduler.reply_count == 1
