from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.api.utils.email_validator import is_valid_email

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"


class SignupRequest(BaseModel):
    email: str
    viewport_width: Optional[int] = Field(
        default=None,
        ge=0,
        description="Browser viewport width in CSS pixels, used to pick the mobile experience.",
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        """
        Reject anything the landing page validator would reject.
        The value is stored exactly as submitted; no trimming or lowercasing.
        """
        if not is_valid_email(value):
            raise ValueError(INVALID_EMAIL_MESSAGE)
        return value


class SignupResponse(BaseModel):
    email: str
    is_new: bool
    is_mobile: bool
    download_url: Optional[str] = None


class EmailExistsResponse(BaseModel):
    email: str
    exists: bool
