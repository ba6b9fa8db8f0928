"""Events emitted by the game controller, plus the audio cue for each"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

log = logging.getLogger(__name__)

START = "start"
ROTATE = "rotate"
LOCK = "lock"
LINE_CLEAR = "line_clear"
GAME_OVER = "game_over"
PAUSE = "pause"
RESUME = "resume"


@dataclass(frozen=True)
class Event:
    kind: str
    lines: int = 0


@dataclass(frozen=True)
class Cue:
    frequency: int
    duration: float
    waveform: str = "sine"


CUES: Dict[str, Cue] = {
    START: Cue(800, 0.4),
    ROTATE: Cue(500, 0.1),
    LOCK: Cue(400, 0.2),
    LINE_CLEAR: Cue(600, 0.3),
    GAME_OVER: Cue(200, 0.5, "sawtooth"),
}


def cue_for(event: Event) -> Optional[Cue]:
    return CUES.get(event.kind)


class LogAudioSink:
    """Audio collaborator that records cues instead of synthesizing them."""

    def __init__(self):
        self.played = []

    def play(self, cue: Cue):
        self.played.append(cue)
        log.debug("cue %dHz %.2fs %s", cue.frequency, cue.duration, cue.waveform)

    def consume(self, events: Iterable[Event]):
        for e in events:
            cue = cue_for(e)
            if cue is not None:
                self.play(cue)
