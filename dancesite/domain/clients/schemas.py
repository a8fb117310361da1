"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ...models import ClientType
from ...shared.validators import as_utc, validate_email, validate_phone


class ClientCreate(BaseModel):
    """Schema for registering a new client"""

    fullName: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=200)
    phone: Optional[str] = None
    clientType: Optional[ClientType] = None
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("fullName")
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Full name is required")
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if not v or not v.strip():
            raise ValueError("Email is required")
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("clientType", mode="before")
    @classmethod
    def parse_client_type(cls, v):
        if v is None:
            return v
        return ClientType.parse(v)


class ClientUpdate(BaseModel):
    """Schema for updating an existing client; omitted fields stay unchanged"""

    fullName: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=200)
    phone: Optional[str] = None
    clientType: Optional[ClientType] = None
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("fullName")
    @classmethod
    def strip_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Full name cannot be blank")
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Email cannot be blank")
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("clientType", mode="before")
    @classmethod
    def parse_client_type(cls, v):
        if v is None:
            return v
        return ClientType.parse(v)

    def changes(self) -> dict[str, Any]:
        """Column name -> new value for the fields present in the request.

        Name, email and type cannot be cleared, so a null there is ignored;
        a null phone or notes clears the stored value.
        """
        supplied = self.model_fields_set
        result: dict[str, Any] = {}
        if "fullName" in supplied and self.fullName is not None:
            result["name"] = self.fullName
        if "email" in supplied and self.email is not None:
            result["email"] = self.email
        if "clientType" in supplied and self.clientType is not None:
            result["client_type"] = self.clientType
        if "phone" in supplied:
            result["phone"] = self.phone
        if "notes" in supplied:
            result["notes"] = self.notes
        return result


class ClientResponse(BaseModel):
    """Schema for client response"""

    id: int
    fullName: str
    email: str
    phone: Optional[str] = None
    clientType: ClientType
    notes: Optional[str] = None
    createdAtUtc: datetime

    @field_validator("createdAtUtc")
    @classmethod
    def mark_utc(cls, v):
        return as_utc(v)
