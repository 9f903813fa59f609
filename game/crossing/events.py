"""
Events emitted by the game logic for the audio and presentation collaborators
"""

from dataclasses import dataclass
from typing import Callable, List, Union


@dataclass(frozen=True)
class PlaySound:
    """Fire-and-forget request to play a sound ('cheer', 'bite' or 'blip')"""
    sound: str


@dataclass(frozen=True)
class SetOverlay:
    """Show or hide an overlay ('instructions' or 'game-over')"""
    name: str
    visible: bool


Event = Union[PlaySound, SetOverlay]


class EventQueue:
    """
    Collects events for consumers.
    Subscribers are called as soon as an event is emitted; the pending list
    can also be drained once per frame.
    """

    def __init__(self):
        self.pending: List[Event] = []
        self._subscribers: List[Callable[[Event], None]] = []

    def subscribe(self, callback: Callable[[Event], None]):
        self._subscribers.append(callback)

    def emit(self, event: Event):
        self.pending.append(event)
        for callback in self._subscribers:
            callback(event)

    def drain(self) -> List[Event]:
        """Return and clear pending events"""
        events, self.pending = self.pending, []
        return events

    def sounds(self) -> List[str]:
        """Sound ids among pending events (does not drain)"""
        return [e.sound for e in self.pending if isinstance(e, PlaySound)]

    def __len__(self):
        return len(self.pending)
