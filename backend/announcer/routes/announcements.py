"""
Announcer Backend — Announcements Route Handler
================================================

What:  Handles GET /api/announcements.
How:   Delegates to AnnouncementService and returns the rows as a JSON array.
Who:   Called once by the browser client (announcer/public/app.js) on page load.

No query parameters, no pagination, no caching headers. Failures surface
as DatabaseError and are turned into a 500 by the global handler.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from announcer.schemas.announcement import AnnouncementResponse, ErrorResponse
from announcer.services.announcement_service import (
    AnnouncementService,
    get_announcement_service,
)

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Announcements"])


@router.get(
    "/announcements",
    response_model=List[AnnouncementResponse],
    responses={
        200: {"description": "Every announcement in store order"},
        500: {"description": "Store unreachable or query failed", "model": ErrorResponse},
    },
    summary="List announcements",
)
async def list_announcements(
    service: AnnouncementService = Depends(get_announcement_service),
) -> List[AnnouncementResponse]:
    """
    Return all announcements.

    Example response:
        [
            {"id": 1, "message": "Welcome to the sample web application!"},
            {"id": 2, "message": "This is your first announcement!"},
            {"id": 3, "message": "Enjoy working on this project!"}
        ]
    """
    announcements = await service.list_announcements()
    logger.debug("Returning %d announcements", len(announcements))
    return announcements
