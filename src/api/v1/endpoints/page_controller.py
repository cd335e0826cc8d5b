from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.schemas.generic import ApiResponse
from src.schemas.views import PageView
from src.services import navigation_service as navigation

router = APIRouter(tags=["Page"])


@router.get(
    "/view",
    response_model=ApiResponse[PageView],
    summary="Current Page",
    description="Render the session's current page against the live content lists.",
)
async def current_view(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    return await page.respond(await page.load())


@router.post(
    "/notifications/dismiss",
    response_model=ApiResponse[PageView],
    summary="Dismiss Notification",
)
async def dismiss_notification(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(navigation.dismiss_notification(state))
