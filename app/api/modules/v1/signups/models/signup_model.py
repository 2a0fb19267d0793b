from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class EmailSignup(SQLModel, table=True):
    """One email address collected from the landing page.

    Attributes:
        email: Submitted address, the unique key of the table.
        created_at: UTC time the row was inserted.
    """

    __tablename__ = "email_signups"

    email: str = Field(primary_key=True, index=True, max_length=254)
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
