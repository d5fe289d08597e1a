# salon_api/schemas.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .core import parse_clock_label


class CamelModel(BaseModel):
    # wire names are camelCase, python attributes snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TreatmentType(str, Enum):
    diagnosis = "Diagnosis"
    treatment = "Treatment"


class TreatmentAnswers(CamelModel):
    """Scalp/hair questionnaire filled in after the first login."""

    oily_sweet_itching_dandruff: bool = False
    scalp_pain_when_touched: bool = False
    dryness_tension_pain: bool = False
    flaking_scalp: bool = False
    hair_loss_amount: str = ""
    hair_pillow_loss: str = ""
    shampoo_frequency: str = ""
    pre_bath_product: str = ""
    hot_water_usage: bool = False
    cold_water_usage: bool = False
    stress: str = ""
    meals: str = ""
    water_intake: str = ""
    snacks: str = ""
    blood_tests: str = ""
    sleep_issues: str = ""


# Catalog

class ProductCreate(BaseModel):
    name: str
    image: str
    description: str


class ProductRemove(BaseModel):
    id: int
    name: Optional[str] = None


# Auth

class SignupRequest(BaseModel):
    name: str
    email: str
    phone: str
    username: str
    password: str = Field(max_length=72)


class LoginRequest(BaseModel):
    userinput: str
    password: str


# Users

class UserLookup(BaseModel):
    userinput: str


class UserInfoUpdate(CamelModel):
    username: str
    treatments: TreatmentAnswers = Field(default_factory=TreatmentAnswers)
    treatment_info: str = ""
    product_info: str = ""


# Calendar

class DayCreate(BaseModel):
    day: str


class DayLookup(BaseModel):
    day: str


class TimeslotCreate(BaseModel):
    day: str
    time: str
    booking: str = ""

    @field_validator("time")
    @classmethod
    def time_must_parse(cls, v: str) -> str:
        parse_clock_label(v)
        return v


class BookingCreate(BaseModel):
    name: str
    username: str
    treatment: str
    day: str
    time: str
