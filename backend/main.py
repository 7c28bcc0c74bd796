import logging
from fastapi import FastAPI
from routers import notification
from utils_others.config import get_settings
from utils_others.error_handler import register_exception_handlers

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title="GrocerEase Notifications API",
    description="Sends expiring-soon and expired grocery item emails via Resend",
    version="1.0.0"
)

# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "GrocerEase notifications API is running"}

# CORS headers are set per response by the notification router
app.include_router(notification.router)

register_exception_handlers(app)
