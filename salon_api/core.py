# salon_api/core.py
"""Timeslot list handling for the booking calendar.

A day's slots are stored as a list of ``{"time": ..., "booking": ...}``
dicts. ``time`` is a range label such as ``"9:00am-10:00am"``; only the part
before the dash matters for ordering. All functions here return new lists of
new dicts and never mutate their input, so the caller can assign the result
back onto a stored document and have the change picked up.
"""

from datetime import datetime, time
from typing import Dict, List, Optional

TimeSlot = Dict[str, str]

_CLOCK_FORMATS = ("%I:%M%p", "%I%p")


def parse_clock_label(label: str) -> time:
    """Parse the start of a slot label into a time of day.

    ``"9:00am-10:00am"`` -> ``time(9, 0)``. Accepts 12-hour labels with or
    without minutes and with any spacing/case around the am/pm marker. The
    marker is required, ``"1:00-2:00"`` is ambiguous. Raises ``ValueError``
    for anything else.
    """
    start = label.split("-")[0].strip().replace(" ", "").upper()
    for fmt in _CLOCK_FORMATS:
        try:
            return datetime.strptime(start, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised time label: {label!r}")


def sort_timeslots(slots: List[TimeSlot]) -> List[TimeSlot]:
    # sorted() is stable, equal start times keep their relative order
    return sorted((dict(slot) for slot in slots), key=lambda s: parse_clock_label(s["time"]))


def has_timeslot(slots: List[TimeSlot], label: str) -> bool:
    return any(slot["time"] == label for slot in slots)


def insert_timeslot(slots: List[TimeSlot], label: str, booking: str = "") -> List[TimeSlot]:
    """Append a slot and re-sort the whole day by start time.

    Duplicate labels are the caller's concern (see ``has_timeslot``).
    """
    return sort_timeslots(list(slots) + [{"time": label, "booking": booking}])


def format_booking(name: str, username: str, treatment: str) -> str:
    return f"{name} ({username}) - {treatment}"


def apply_booking(slots: List[TimeSlot], label: str, booking: str) -> List[TimeSlot]:
    """Overwrite the booking of every slot whose label equals ``label``.

    A label that matches nothing leaves the list unchanged.
    """
    return [
        {**slot, "booking": booking} if slot["time"] == label else dict(slot)
        for slot in slots
    ]


def find_timeslot(slots: List[TimeSlot], label: str) -> Optional[TimeSlot]:
    for slot in slots:
        if slot["time"] == label:
            return slot
    return None
