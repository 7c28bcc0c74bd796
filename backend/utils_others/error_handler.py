import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from models.shared_schemas import ErrorResponse
from utils_others.cors import CORS_HEADERS

class AppError(Exception):
    def __init__(self, message: str, status_code: int = 400, code: str = "app_error"):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message

class RequestValidationFailed(AppError):
    def __init__(self, message: str = "Invalid notification request"):
        super().__init__(message, status_code=400, code="validation_error")

class EmailError(AppError):
    """Raised when an email cannot be handed to the provider."""
    def __init__(self, message: str = "Email could not be sent"):
        super().__init__(message, status_code=500, code="email_error")

def error_response(status_code: int, message: str, details: list = None) -> JSONResponse:
    content = ErrorResponse(error=message, details=details or None).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        response = error_response(exc.status_code, str(exc.detail))
        response.headers.update(getattr(exc, "headers", None) or {})
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        details = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        logging.info(f"Rejected notification request on {request.url.path}: {details}")
        return error_response(400, RequestValidationFailed().message, details)
