import logging
import resend
from resend.exceptions import ResendError
from models.notification_models import EmailMessage
from utils_others.error_handler import EmailError

def send_email(message: EmailMessage, api_key: str) -> dict:
    """
    Send an email via the Resend API.
    Raises EmailError on failure.

    The key is passed in by the caller; the SDK only reads it from its module
    attribute, so it is set there right before the call.
    """
    if not api_key:
        raise EmailError("Missing RESEND_API_KEY")

    resend.api_key = api_key

    try:
        return resend.Emails.send({
            "from": message.from_addr,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        })
    except ResendError as e:
        status = getattr(e, "code", None) or "unknown"
        logging.warning(f"Resend rejected email: {status} {getattr(e, 'message', e)}")
        raise EmailError(f"Resend API error: {status}") from e
    except Exception as e:
        raise EmailError(str(e)) from e
