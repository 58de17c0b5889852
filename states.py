# states.py
from enum import Enum

class PlaybackState(Enum):
    IDLE = 0
    RUNNING = 1
    PAUSED = 2
    DONE = 3
    CANCELLED = 4

class SimState(Enum):
    IDLE = 0
    SWEEPING = 1
