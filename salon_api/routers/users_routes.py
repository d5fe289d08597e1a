# salon_api/routers/users_routes.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm.attributes import flag_modified
from sqlmodel import Session, or_, select

from salon_api.auth import get_current_user_id
from salon_api.deps import get_session
from salon_api.errors import NotFound
from salon_api.models import User
from salon_api.schemas import TreatmentAnswers, UserInfoUpdate, UserLookup

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["users"],
)


def user_public(user: User, include_password: bool = False) -> dict:
    # stored answers are re-validated so old rows gain any missing defaults
    treatments = TreatmentAnswers.model_validate(user.treatments or {})
    data = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "username": user.username,
        "createdAt": user.created_at.isoformat(),
        "firstLoginDone": user.first_login_done,
        "treatments": treatments.model_dump(by_alias=True),
        "treatmentInfo": user.treatment_info,
        "productInfo": user.product_info,
        "treatmentType": user.treatment_type,
    }
    if include_password:
        data["passwordHash"] = user.password_hash
    return data


@router.get("/getuserinfo")
def get_user_info(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    user = session.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")
    return {"success": True, "user": user_public(user)}


@router.post("/getuserinfoadmin")
def get_user_info_admin(
    req: UserLookup,
    session: Session = Depends(get_session),
):
    # back-office lookup: no token, matches email, username or phone
    user = session.exec(
        select(User).where(
            or_(
                User.email == req.userinput,
                User.username == req.userinput,
                User.phone == req.userinput,
            )
        )
    ).first()
    if user is None:
        raise NotFound("User not found.")
    return {"success": True, "user": user_public(user, include_password=True)}


@router.post("/updateuserinfo")
def update_user_info(
    req: UserInfoUpdate,
    session: Session = Depends(get_session),
):
    user = session.exec(select(User).where(User.username == req.username)).first()
    if user is None:
        logger.warning(f"updateuserinfo: no user named {req.username!r}, nothing written")
        return {"success": True, "message": "User updated successfully."}

    # whole-field overwrite, anything the caller left out is reset
    user.treatments = req.treatments.model_dump(by_alias=True)
    flag_modified(user, "treatments")
    user.treatment_info = req.treatment_info
    user.product_info = req.product_info
    user.first_login_done = True

    session.add(user)
    session.commit()
    logger.info(f"Questionnaire updated for {req.username}")

    return {"success": True, "message": "User updated successfully."}
