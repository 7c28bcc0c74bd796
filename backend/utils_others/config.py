import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_SENDER = "onboarding@resend.dev"

class NotificationSettings(BaseModel):
    resend_api_key: Optional[str] = None
    email_from: str = DEFAULT_SENDER
    log_level: str = "INFO"

def get_settings() -> NotificationSettings:
    """
    Builds settings from the environment (and .env, loaded at import).
    Used as a FastAPI dependency so tests can swap it via dependency_overrides.
    """
    return NotificationSettings(
        resend_api_key=os.getenv("RESEND_API_KEY") or None,
        email_from=os.getenv("EMAIL_FROM", DEFAULT_SENDER),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
