import logging
from models.notification_models import EmailMessage, NotificationRequest, NotificationResult
from utils_others.config import NotificationSettings
from utils_others.email_templates import render_notification
from utils_others.resend_email import send_email

class NotificationService:
    def __init__(self, settings: NotificationSettings) -> None:
        self.settings = settings

    def build_message(self, request: NotificationRequest) -> EmailMessage:
        subject, html = render_notification(request.notification_type, request.items, request.user_name)
        return EmailMessage(
            from_addr=self.settings.email_from,
            to=[request.user_email],
            subject=subject,
            html=html,
        )

    def send(self, request: NotificationRequest) -> NotificationResult:
        message = self.build_message(request)
        notification_type = request.notification_type.value

        logging.info(
            f"Sending {notification_type} notification for {len(request.items)} item(s) to {request.user_email}"
        )
        email_res = send_email(message, api_key=self.settings.resend_api_key)
        email_id = email_res.get("id") if isinstance(email_res, dict) else None
        if not email_id:
            logging.warning(f"Resend returned no email id for {notification_type} notification: {email_res}")
        else:
            logging.info(f"Resend accepted {notification_type} notification: {email_id}")

        return NotificationResult(
            message=f"{notification_type} notification sent successfully",
            email_id=email_id,
            items_count=len(request.items),
        )
