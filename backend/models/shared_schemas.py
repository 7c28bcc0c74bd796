from typing import Any, Dict, List, Optional
from pydantic import BaseModel

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[List[Dict[str, Any]]] = None
