"""cs_session endpoints (mounted under /api).

GET    /session count views for the caller's session
DELETE /session drop the session and its cookie
"""

from fastapi import APIRouter, Request, Response, status

from src.cs_common.response import ApiResponse, success_response
from src.cs_session.api.dependencies import CurrentSession, SessionSvc

router = APIRouter(prefix="/session", tags=["session"])


def _stored_views(data: dict) -> int:
    """Stored count, or 0 when the entry holds something that is not a count."""
    try:
        return int(data.get("views", 0))
    except (TypeError, ValueError):
        return 0


@router.get("")
async def track_views(
    request: Request,
    response: Response,
    session: CurrentSession,
    service: SessionSvc,
) -> ApiResponse:
    views = _stored_views(session.data) + 1
    session.data["views"] = views
    await service.commit(session, response)
    return success_response(
        {
            "session_id": session.session_id,
            "views": views,
            "message": "Session stored in Redis",
        },
        request,
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(session: CurrentSession, service: SessionSvc) -> Response:
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    await service.destroy(session, response)
    return response
