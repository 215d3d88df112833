from enum import Enum, auto

#Authoritative list of special key actions. Letter keys carry no action.
class Action(str, Enum):
    def _generate_next_value_(name, *_):
        return name

    shift           = auto()  # flip letter case
    clear           = auto()  # wipe the typed word
    delete          = auto()  # drop the last character
    space           = auto()
    history_back    = auto()  # previous committed word
    history_forward = auto()  # next committed word
    sound           = auto()  # toggle spoken words

    def is_navigation(self) -> bool:
        """Return ``True`` if this action browses the word history."""
        return self in _NAVIGATION_ACTIONS

    @classmethod
    def parse(cls, value):
        """Return the :class:`Action` named ``value`` or ``None``."""
        if value is None or isinstance(value, cls):
            return value
        return cls.__members__.get(str(value))


_NAVIGATION_ACTIONS = frozenset({Action.history_back, Action.history_forward})
