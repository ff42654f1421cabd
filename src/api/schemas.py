"""
Response envelope shared by every endpoint.

Success: {success: true, message, data?, pagination?}
Error:   {success: false, message, error: <code>, statusCode}
"""

from typing import Any, Optional

from src.app.use_cases.common import Paginated, PaginationMeta


def success(message: str, data: Any = None, pagination: Optional[PaginationMeta] = None) -> dict:
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return body


def paginated(message: str, page: Paginated) -> dict:
    return success(message, data=page.items, pagination=page.pagination)


def failure(code: str, message: str, status_code: int) -> dict:
    return {
        "success": False,
        "message": message,
        "error": code,
        "statusCode": status_code,
    }
