"""Task schemas"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

# Fields that must hold a non-empty string, with the message reported when they don't
REQUIRED_FIELD_MESSAGES = {
    "name": "Name cannot be empty!",
    "surname": "Surname cannot be empty!",
    "phone": "Phone cannot be empty!",
}


def _empty_error(field_name: str) -> PydanticCustomError:
    return PydanticCustomError("not_empty", REQUIRED_FIELD_MESSAGES[field_name])


class TaskCreate(BaseModel):
    """Schema for creating or fully replacing a task"""

    # Missing and null values go through the validator so they report the same message as ""
    name: Optional[str] = Field(None, validate_default=True)
    surname: Optional[str] = Field(None, validate_default=True)
    email: Optional[str] = None
    phone: Optional[str] = Field(None, validate_default=True)

    @field_validator("name", "surname", "phone")
    @classmethod
    def not_empty(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Reject missing, null and empty values"""
        if not v:
            raise _empty_error(info.field_name)
        return v


class TaskPatch(BaseModel):
    """Schema for partially updating a task; absent or null fields are left untouched"""

    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name", "surname", "phone")
    @classmethod
    def not_empty_when_given(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is not None and not v:
            raise _empty_error(info.field_name)
        return v


class TaskResponse(BaseModel):
    """Schema for task response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    surname: str
    email: Optional[str] = None
    phone: str
