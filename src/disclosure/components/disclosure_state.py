"""States and inbound events of the show/hide machine."""
from enum import Enum, auto


class DisclosureState(Enum):
    HIDDEN = auto()
    PENDING = auto()
    VISIBLE = auto()


class DisclosureEvent(Enum):
    """Trigger events delivered by the host UI layer; no payload beyond the kind."""
    POINTER_ENTER = auto()
    POINTER_LEAVE = auto()
    FOCUS = auto()
    BLUR = auto()
    ESCAPE = auto()
    UNMOUNT = auto()
