from typing import Any, Dict, Optional
from datetime import datetime
from zoneinfo import ZoneInfo

from app.config import settings

# Timestamps in responses use the application calendar
APP_TZ = ZoneInfo(settings.APP_TIMEZONE)


def _now_str() -> str:
    return datetime.now(APP_TZ).strftime("%Y-%m-%d %H:%M:%S")

# Utility functions for creating consistent responses
def create_success_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    """Create a success response with a local timestamp"""
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": _now_str()
    }

def create_error_response(message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Create an error response with a local timestamp"""
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "details": details,
        "timestamp": _now_str()
    }
