from tetris_events import (CUES, GAME_OVER, LINE_CLEAR, LOCK, PAUSE, Cue, Event,
                           LogAudioSink, cue_for)


def test_cue_table():
    assert cue_for(Event(GAME_OVER)) == Cue(200, 0.5, "sawtooth")
    assert cue_for(Event(LINE_CLEAR, 3)) == Cue(600, 0.3, "sine")
    assert cue_for(Event(PAUSE)) is None
    assert all(c.waveform in ("sine", "sawtooth") for c in CUES.values())


def test_sink_plays_only_events_with_cues():
    sink = LogAudioSink()
    sink.consume([Event(LOCK), Event(PAUSE), Event(LINE_CLEAR, 1)])
    assert sink.played == [CUES[LOCK], CUES[LINE_CLEAR]]
