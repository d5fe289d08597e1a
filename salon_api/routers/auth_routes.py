# salon_api/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, or_, select

from salon_api.auth import create_access_token, hash_password, verify_password
from salon_api.config import Settings
from salon_api.deps import get_session, get_settings
from salon_api.errors import Conflict, InvalidCredentials
from salon_api.models import User
from salon_api.schemas import LoginRequest, SignupRequest, TreatmentAnswers, TreatmentType

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["auth"],
)

# checked in this order, the first collision is the one reported
UNIQUE_FIELDS = (
    ("email", "Existing user found with same email address"),
    ("phone", "Existing user found with same phone number"),
    ("username", "Existing user found with same username"),
)


@router.post("/signup")
def signup(
    req: SignupRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    # 1) Uniqueness checks
    for field_name, message in UNIQUE_FIELDS:
        existing = session.exec(
            select(User).where(getattr(User, field_name) == getattr(req, field_name))
        ).first()
        if existing is not None:
            raise Conflict(message)

    # 2) Create user in DB, questionnaire at defaults
    db_user = User(
        name=req.name,
        email=req.email,
        phone=req.phone,
        username=req.username,
        password_hash=hash_password(req.password),
        treatments=TreatmentAnswers().model_dump(by_alias=True),
        treatment_type=TreatmentType.diagnosis.value,
    )

    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        # lost a race against another signup with the same details
        session.rollback()
        raise Conflict("Existing user found with same details")

    session.refresh(db_user)
    logger.info(f"User registered: {db_user.username} ({db_user.id})")

    # 3) Signup tokens carry no expiry
    token = create_access_token(db_user.id, settings)
    return {"success": True, "token": token}


@router.post("/login")
def login(
    req: LoginRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    user = session.exec(
        select(User).where(or_(User.email == req.userinput, User.username == req.userinput))
    ).first()

    if user is None or not verify_password(req.password, user.password_hash):
        logger.warning(f"Rejected login for {req.userinput!r}")
        raise InvalidCredentials()

    token = create_access_token(
        user.id, settings, expires_minutes=settings.login_token_expire_minutes
    )
    return {"success": True, "token": token}
