from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactStatus(StrEnum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


class ContactSubmission(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=120)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=40)
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=5000)


class ContactStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: ContactStatus


class ContactMessage(ContactSubmission):
    id: str
    status: ContactStatus = ContactStatus.NEW
    created_at: datetime | None = None
    updated_at: datetime | None = None
