from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.dependencies.services import get_crud_gateway
from src.model.enums import AdminView
from src.model.state import AppState, BlogEditorState
from src.schemas.generic import ApiResponse
from src.schemas.requests import BlogFieldsRequest, TagsRequest
from src.schemas.views import PageView
from src.services import blog_editor
from src.services import navigation_service as navigation
from src.services.crud_gateway import CrudGateway
from src.utils.exceptions import BadRequestException, ResourceNotFoundException

router = APIRouter(prefix="/admin/blogs", tags=["Admin Blogs"])


def _editor(state: AppState) -> BlogEditorState:
    if state.blog_editor is None:
        raise BadRequestException("No blog post is being edited")
    return state.blog_editor


def _with_editor(state: AppState, editor: BlogEditorState) -> AppState:
    return state.model_copy(update={"blog_editor": editor})


@router.post("/new", response_model=ApiResponse[PageView], summary="New Blog Draft")
async def create_blog(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.BLOGS, blog_editor=blog_editor.start_create())
    )


@router.post("/{blog_id}/edit", response_model=ApiResponse[PageView], summary="Edit Blog Post")
async def edit_blog(
        blog_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    blog = page.sync.find_blog(blog_id)
    if blog is None:
        raise ResourceNotFoundException(f"Blog post not found: {blog_id}")
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.BLOGS, blog_editor=blog_editor.start_edit(blog))
    )


@router.patch("/draft", response_model=ApiResponse[PageView], summary="Update Blog Fields")
async def update_fields(
        request: BlogFieldsRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = blog_editor.update_fields(
        _editor(state), **request.model_dump(exclude_unset=True, exclude_none=True)
    )
    return await page.respond(_with_editor(state, editor))


@router.put(
    "/draft/tags",
    response_model=ApiResponse[PageView],
    summary="Set Tags",
    description="Comma-separated tags; each entry is trimmed and empty entries are dropped.",
)
async def set_tags(
        request: TagsRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = blog_editor.set_tags_text(_editor(state), request.text)
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/commit", response_model=ApiResponse[PageView], summary="Save Blog Post")
async def commit(
        page: PageContext = Depends(get_page_context),
        gateway: CrudGateway = Depends(get_crud_gateway),
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(await gateway.commit_blog(state))


@router.post("/draft/cancel", response_model=ApiResponse[PageView], summary="Discard Blog Draft")
async def cancel(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(_with_editor(state, None))
