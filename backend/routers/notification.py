import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from models.notification_models import NotificationRequest, NotificationResult
from models.shared_schemas import ErrorResponse
from services.notification_service import NotificationService
from utils_others.config import NotificationSettings, get_settings
from utils_others.cors import CORS_HEADERS, preflight_response
from utils_others.error_handler import AppError, error_response

router = APIRouter(tags=["notification"])

def get_notification_service(settings: NotificationSettings = Depends(get_settings)) -> NotificationService:
    return NotificationService(settings)

@router.options("/grocery-notifications")
def grocery_notifications_preflight():
    return preflight_response()

@router.post(
    "/grocery-notifications",
    response_model=NotificationResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def send_grocery_notification(
    payload: NotificationRequest,
    service: NotificationService = Depends(get_notification_service),
):
    """Render the expiry email for the given items and send it through Resend"""
    try:
        result = service.send(payload)
        return JSONResponse(
            status_code=200,
            content=result.model_dump(by_alias=True),
            headers=CORS_HEADERS,
        )
    except AppError as ae:
        logging.error(f"{payload.notification_type.value} notification failed: {ae.message}")
        return error_response(ae.status_code, ae.message)
    except Exception as e:
        logging.exception(f"{payload.notification_type.value} notification failed")
        return error_response(500, str(e))
