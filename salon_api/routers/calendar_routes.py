# salon_api/routers/calendar_routes.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.attributes import flag_modified
from sqlmodel import Session, select

from salon_api.core import apply_booking, find_timeslot, format_booking, has_timeslot, insert_timeslot
from salon_api.deps import get_session
from salon_api.errors import Conflict, NotFound
from salon_api.models import DayCalendar, User
from salon_api.schemas import BookingCreate, DayCreate, DayLookup, TimeslotCreate, TreatmentType

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["calendar"],
)

DATE_NOT_FOUND = "Date not found"


def calendar_public(calendar: DayCalendar) -> dict:
    return {
        "id": calendar.id,
        "day": calendar.day,
        "times": [{"time": s["time"], "booking": s["booking"]} for s in calendar.times or []],
    }


def find_calendar(session: Session, day: str):
    return session.exec(select(DayCalendar).where(DayCalendar.day == day)).first()


def require_calendar(session: Session, day: str) -> DayCalendar:
    calendar = find_calendar(session, day)
    if calendar is None:
        raise NotFound("Date entry not found.")
    return calendar


@router.post("/create-date")
def create_date(
    req: DayCreate,
    session: Session = Depends(get_session),
):
    if find_calendar(session, req.day) is not None:
        raise Conflict("A date entry already exists for this day")

    calendar = DayCalendar(day=req.day, times=[])
    session.add(calendar)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise Conflict("A date entry already exists for this day")

    session.refresh(calendar)
    logger.info(f"Calendar created for {req.day}")
    return {"success": True, "date": calendar_public(calendar), "message": "Date added successfully"}


@router.post("/add-timeslot")
def add_timeslot(
    req: TimeslotCreate,
    session: Session = Depends(get_session),
):
    calendar = require_calendar(session, req.day)

    if has_timeslot(calendar.times or [], req.time):
        raise Conflict("This timeslot already exists.")

    # read-modify-write of the whole day
    calendar.times = insert_timeslot(calendar.times or [], req.time, req.booking)
    flag_modified(calendar, "times")
    session.add(calendar)
    session.commit()
    session.refresh(calendar)

    logger.info(f"Timeslot {req.time} added to {req.day}")
    return {"success": True, "date": calendar_public(calendar), "message": "Time added Successfully"}


@router.post("/get-date")
def get_date(
    req: DayLookup,
    session: Session = Depends(get_session),
):
    calendar = find_calendar(session, req.day)
    if calendar is None:
        # soft miss: still a success, times carries a string instead of a list
        return {"success": True, "date": {"day": req.day, "times": DATE_NOT_FOUND}}
    return {"success": True, "date": calendar_public(calendar)}


@router.post("/book-treatment")
def book_treatment(
    req: BookingCreate,
    session: Session = Depends(get_session),
):
    calendar = require_calendar(session, req.day)

    # 1) Flag the user as in treatment (no-op when the username is unknown)
    user = session.exec(select(User).where(User.username == req.username)).first()
    if user is None:
        logger.warning(f"book-treatment: no user named {req.username!r}")
    else:
        user.treatment_type = TreatmentType.treatment.value
        session.add(user)

    # 2) Overwrite the booking on the matching slot
    times = calendar.times or []
    booking = format_booking(req.name, req.username, req.treatment)
    if find_timeslot(times, req.time) is None:
        logger.warning(f"book-treatment: no slot {req.time!r} on {req.day}, slots unchanged")
    else:
        logger.info(f"Booking on {req.day} {req.time}: {booking}")
    calendar.times = apply_booking(times, req.time, booking)
    flag_modified(calendar, "times")
    session.add(calendar)

    session.commit()

    return {"success": True, "message": "Booking updated successfully"}
