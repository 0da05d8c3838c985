"""Welcome Route: static greeting, no upstream call."""

from fastapi import APIRouter

from jokes_api.schemas.jokes import WelcomeResponse

router = APIRouter(tags=["welcome"])


@router.get("/", response_model=WelcomeResponse)
async def welcome():
    """Static reply; independent of upstream availability."""
    return WelcomeResponse()
