import logging

from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.dependencies.services import get_admin_gate, get_crud_gateway
from src.repositories.content_repo import AssessmentRepository, BlogRepository, CourseRepository
from src.schemas.generic import ApiResponse
from src.schemas.requests import AdminLoginRequest, AdminViewRequest
from src.schemas.views import PageView
from src.services import navigation_service as navigation
from src.services.admin_gate_service import AdminGateService
from src.services.crud_gateway import CrudGateway
from src.utils.exceptions import BadRequestException, ResourceNotFoundException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/login",
    response_model=ApiResponse[PageView],
    summary="Enter Admin Mode",
    description="Check the secret code; a wrong code leaves the page unchanged with an Access Denied notification.",
)
async def login(
        request: AdminLoginRequest,
        page: PageContext = Depends(get_page_context),
        gate: AdminGateService = Depends(get_admin_gate),
) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(gate.submit_secret_code(state, request.code))


@router.post("/logout", response_model=ApiResponse[PageView], summary="Leave Admin Mode")
async def logout(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(AdminGateService.logout(state))


@router.post(
    "/view",
    response_model=ApiResponse[PageView],
    summary="Switch Admin View",
    description="Open the admin panel on a sub-view. Any open draft is discarded.",
)
async def switch_view(
        request: AdminViewRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(navigation.switch_admin_view(state, request.admin_view))


@router.delete(
    "/{collection}/{doc_id}",
    response_model=ApiResponse[PageView],
    summary="Delete Document",
    description="Delete a course, assessment or blog post by id.",
)
async def delete_document(
        collection: str,
        doc_id: str,
        page: PageContext = Depends(get_page_context),
        gateway: CrudGateway = Depends(get_crud_gateway),
) -> ApiResponse[PageView]:
    state = await page.load_admin()

    if collection == CourseRepository.COLLECTION:
        found, delete = page.sync.find_course(doc_id), gateway.delete_course
    elif collection == AssessmentRepository.COLLECTION:
        found, delete = page.sync.find_assessment(doc_id), gateway.delete_assessment
    elif collection == BlogRepository.COLLECTION:
        found, delete = page.sync.find_blog(doc_id), gateway.delete_blog
    else:
        raise BadRequestException(f"Unknown collection: {collection}")

    if found is None:
        raise ResourceNotFoundException(f"Document not found: {collection}/{doc_id}")

    return await page.respond(await delete(state, doc_id))
