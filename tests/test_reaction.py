from veggie_catch.core import Polarity, ReactionDisplay, ReactionEvent


def test_event_for_catch():
    assert ReactionEvent.for_catch(False).polarity is Polarity.GOOD
    assert ReactionEvent.for_catch(True).polarity is Polarity.BAD
    assert ReactionEvent.for_catch(True).text != ReactionEvent.for_catch(False).text


def test_expires_at_deadline():
    display = ReactionDisplay(duration_ticks=30)
    display.show(ReactionEvent.for_catch(False), now_tick=0)
    assert not display.expire(29)
    assert display.showing
    assert display.expire(30)
    assert not display.showing
    assert not display.expire(31)


def test_new_event_rearms_deadline():
    display = ReactionDisplay(duration_ticks=30)
    display.show(ReactionEvent.for_catch(False), now_tick=0)
    display.show(ReactionEvent.for_catch(True), now_tick=20)
    assert not display.expire(30)
    assert display.current.polarity is Polarity.BAD
    assert display.expire(50)


def test_clear():
    display = ReactionDisplay()
    display.show(ReactionEvent.for_catch(False), now_tick=0)
    display.clear()
    assert not display.showing
    assert display.deadline is None
