from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from typing import List, Optional, Union
from enum import Enum

class NotificationType(str, Enum):
    expiring_soon = "expiring_soon"
    expired = "expired"

class Item(BaseModel):
    name: str
    expiration_date: str  # as sent by the client, rendered verbatim
    days_until_expiration: Optional[Union[int, float]] = None

class NotificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    user_email: EmailStr = Field(alias="userEmail")
    user_name: str = Field(alias="userName")
    notification_type: NotificationType = Field(alias="notificationType")
    items: List[Item] = Field(min_length=1)

    @model_validator(mode="after")
    def check_days_for_expiring_soon(self):
        if self.notification_type == NotificationType.expiring_soon:
            missing = [item.name for item in self.items if item.days_until_expiration is None]
            if missing:
                raise ValueError(
                    "days_until_expiration is required for expiring_soon items: " + ", ".join(missing)
                )
        return self

class EmailMessage(BaseModel):
    """Outbound payload for the Resend /emails endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    from_addr: str = Field(alias="from")
    to: List[str]
    subject: str
    html: str

class NotificationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    email_id: Optional[str] = Field(default=None, alias="emailId")
    items_count: int = Field(alias="itemsCount")
