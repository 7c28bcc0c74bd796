from typing import Iterable, Tuple
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from models.notification_models import Item, NotificationType

SUBJECTS = {
    NotificationType.expiring_soon: "🍎 GrocerEase: Items Expiring Soon!",
    NotificationType.expired: "⚠️ GrocerEase: Expired Items Alert",
}

class EmailTemplates:
    def __init__(self):
        template_dir = Path(__file__).parent / 'templates'
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html']),
        )

    def expiring_soon(self, user_name: str, items: Iterable[Item]) -> str:
        """Items nearing expiration, each with its days remaining"""
        template = self.env.get_template('expiring_soon.html')
        return template.render(user_name=user_name, items=list(items))

    def expired(self, user_name: str, items: Iterable[Item]) -> str:
        """Items past their expiration date, with a safety reminder"""
        template = self.env.get_template('expired.html')
        return template.render(user_name=user_name, items=list(items))

_templates = EmailTemplates()

def render_notification(notification_type, items: Iterable[Item], user_name: str) -> Tuple[str, str]:
    """
    Returns (subject, html) for a notification. Has no side effects; the result
    depends only on the arguments.
    Raises ValueError for an unknown notification type.
    """
    try:
        notification_type = NotificationType(notification_type)
    except ValueError:
        raise ValueError(f"Unsupported notification type: {notification_type}")

    if notification_type == NotificationType.expiring_soon:
        html = _templates.expiring_soon(user_name, items)
    else:
        html = _templates.expired(user_name, items)
    return SUBJECTS[notification_type], html
