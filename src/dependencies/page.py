from fastapi import Depends

from src.dependencies.services import get_live_sync, get_session_service, get_view_service
from src.model.state import AppState
from src.schemas.generic import ApiResponse
from src.schemas.views import PageView
from src.services.admin_gate_service import AdminGateService
from src.services.live_sync import LiveCollectionSync
from src.services.session_service import SessionService
from src.services.view_service import ViewService


class PageContext:
    """
    Load -> transition -> render -> save, shared by every endpoint.

    Example:
        state = await page.load()
        state = navigation_service.go_home(state)
        return await page.respond(state)
    """

    def __init__(self, session: SessionService, views: ViewService, sync: LiveCollectionSync):
        self.session = session
        self.views = views
        self.sync = sync

    async def load(self) -> AppState:
        return await self.session.load()

    async def load_admin(self) -> AppState:
        state = await self.session.load()
        AdminGateService.require_admin(state)
        return state

    async def respond(self, state: AppState) -> ApiResponse[PageView]:
        state, view = self.views.render(state)
        await self.session.save(state)
        return ApiResponse.success(data=view)


def get_page_context(
        session: SessionService = Depends(get_session_service),
        views: ViewService = Depends(get_view_service),
        sync: LiveCollectionSync = Depends(get_live_sync),
) -> PageContext:
    return PageContext(session, views, sync)
