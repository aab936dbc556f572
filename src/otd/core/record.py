"""Pure record domain model - no I/O dependencies."""

from dataclasses import dataclass, field

DEFAULT_DATE = "Today"


@dataclass(frozen=True)
class Event:
    """A historical event. Year is empty when the line couldn't be split."""

    year: str
    text: str

    def to_dict(self) -> dict:
        return {"Year": self.year, "Text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(year=_as_str(data["Year"]), text=_as_str(data["Text"]))


@dataclass(frozen=True)
class Birthday:
    """A notable birthday (or death) with its parenthetical year info."""

    name: str
    year_info: str

    def to_dict(self) -> dict:
        return {"Name": self.name, "Year": self.year_info}

    @classmethod
    def from_dict(cls, data: dict) -> "Birthday":
        return cls(name=_as_str(data["Name"]), year_info=_as_str(data["Year"]))


@dataclass(frozen=True)
class Record:
    """
    One day's extracted page content.

    Events and birthdays keep document order. Both are tuples so the
    record can be sliced by the presentation layer but never mutated.
    """

    date: str = DEFAULT_DATE
    events: tuple[Event, ...] = field(default_factory=tuple)
    birthdays: tuple[Birthday, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "events", tuple(self.events))
        object.__setattr__(self, "birthdays", tuple(self.birthdays))

    def to_dict(self) -> dict:
        """Serialize using the cache file's field names."""
        return {
            "Date": self.date,
            "Events": [e.to_dict() for e in self.events],
            "Birthdays": [b.to_dict() for b in self.birthdays],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """
        Build a Record from its serialized form.

        A null collection reads as empty. Missing keys or wrong types
        raise KeyError/TypeError.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected object, got {type(data).__name__}")
        return cls(
            date=_as_str(data["Date"]),
            events=tuple(Event.from_dict(e) for e in data.get("Events") or []),
            birthdays=tuple(Birthday.from_dict(b) for b in data.get("Birthdays") or []),
        )


def _as_str(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected string, got {type(value).__name__}")
    return value
