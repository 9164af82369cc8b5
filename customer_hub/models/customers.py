# customer_hub/models/customers.py

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

# Shown in place of a missing phone number.
PHONE_PLACEHOLDER = "—"


class CustomerOut(BaseModel):
    id: int
    name: str
    email: EmailStr
    phone: Optional[str] = None

    class Config:
        from_attributes = True

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def phone_display(self) -> str:
        return self.phone if self.phone is not None else PHONE_PLACEHOLDER


class ImportResult(BaseModel):
    imported: int
    skipped: int
