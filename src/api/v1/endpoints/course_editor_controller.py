from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.dependencies.services import get_crud_gateway
from src.model.enums import AdminView
from src.model.state import AppState, CourseEditorState
from src.schemas.generic import ApiResponse
from src.schemas.requests import (
    CourseFieldsRequest,
    LessonFormRequest,
    NewSectionRequest,
    TitleRequest,
)
from src.schemas.views import PageView
from src.services import course_editor
from src.services import navigation_service as navigation
from src.services.crud_gateway import CrudGateway
from src.utils.exceptions import BadRequestException, ResourceNotFoundException

router = APIRouter(prefix="/admin/courses", tags=["Admin Courses"])


def _editor(state: AppState) -> CourseEditorState:
    if state.course_editor is None:
        raise BadRequestException("No course is being edited")
    return state.course_editor


def _with_editor(state: AppState, editor: CourseEditorState) -> AppState:
    return state.model_copy(update={"course_editor": editor})


# =============================
#   Draft lifecycle
# =============================
@router.post("/new", response_model=ApiResponse[PageView], summary="New Course Draft")
async def create_course(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.COURSES, course_editor=course_editor.start_create())
    )


@router.post(
    "/{course_id}/edit",
    response_model=ApiResponse[PageView],
    summary="Edit Course",
    description="Open a draft copy of a course in the admin panel.",
)
async def edit_course(
        course_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    course = page.sync.find_course(course_id)
    if course is None:
        raise ResourceNotFoundException(f"Course not found: {course_id}")
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.COURSES, course_editor=course_editor.start_edit(course))
    )


@router.patch("/draft", response_model=ApiResponse[PageView], summary="Update Course Fields")
async def update_fields(
        request: CourseFieldsRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.update_fields(
        _editor(state), **request.model_dump(exclude_unset=True, exclude_none=True)
    )
    return await page.respond(_with_editor(state, editor))


@router.post(
    "/draft/commit",
    response_model=ApiResponse[PageView],
    summary="Save Course",
    description="Create or replace the course; the draft stays open if the write fails.",
)
async def commit(
        page: PageContext = Depends(get_page_context),
        gateway: CrudGateway = Depends(get_crud_gateway),
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(await gateway.commit_course(state))


@router.post("/draft/cancel", response_model=ApiResponse[PageView], summary="Discard Course Draft")
async def cancel(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(_with_editor(state, None))


# =============================
#   Sections
# =============================
@router.put("/draft/sections/new-title", response_model=ApiResponse[PageView], summary="Set New Section Title")
async def set_new_section_title(
        request: TitleRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.set_new_section_title(_editor(state), request.title)
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/sections", response_model=ApiResponse[PageView], summary="Add Section")
async def add_section(
        request: NewSectionRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.add_section(_editor(state), request.title)
    return await page.respond(_with_editor(state, editor))


@router.post(
    "/draft/sections/{section_id}/rename",
    response_model=ApiResponse[PageView],
    summary="Begin Section Rename",
)
async def begin_section_rename(
        section_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.begin_section_rename(_editor(state), section_id)
    return await page.respond(_with_editor(state, editor))


@router.put("/draft/section-rename", response_model=ApiResponse[PageView], summary="Set Section Rename Title")
async def set_section_rename_title(
        request: TitleRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.set_section_rename_title(_editor(state), request.title)
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/section-rename/commit", response_model=ApiResponse[PageView], summary="Commit Section Rename")
async def commit_section_rename(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.commit_section_rename(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/section-rename/cancel", response_model=ApiResponse[PageView], summary="Cancel Section Rename")
async def cancel_section_rename(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.cancel_section_rename(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.delete(
    "/draft/sections/{section_id}",
    response_model=ApiResponse[PageView],
    summary="Delete Section",
    description="Remove a section and every lesson in it from the draft.",
)
async def delete_section(
        section_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.delete_section(_editor(state), section_id)
    return await page.respond(_with_editor(state, editor))


# =============================
#   Lessons
# =============================
@router.post(
    "/draft/sections/{section_id}/lessons/new",
    response_model=ApiResponse[PageView],
    summary="Open Add-Lesson Form",
)
async def open_lesson_form(
        section_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.open_lesson_form(_editor(state), section_id)
    return await page.respond(_with_editor(state, editor))


@router.post(
    "/draft/sections/{section_id}/lessons/{lesson_id}/edit",
    response_model=ApiResponse[PageView],
    summary="Open Edit-Lesson Form",
)
async def open_lesson_edit_form(
        section_id: str, lesson_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.open_lesson_edit_form(_editor(state), section_id, lesson_id)
    return await page.respond(_with_editor(state, editor))


@router.patch("/draft/lesson-form", response_model=ApiResponse[PageView], summary="Update Lesson Form")
async def update_lesson_form(
        request: LessonFormRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.update_lesson_form(_editor(state), **request.model_dump(exclude_unset=True))
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/lesson-form/save", response_model=ApiResponse[PageView], summary="Save Lesson")
async def save_lesson(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.save_lesson(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/lesson-form/cancel", response_model=ApiResponse[PageView], summary="Cancel Lesson Form")
async def cancel_lesson_form(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.cancel_lesson_form(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.delete(
    "/draft/sections/{section_id}/lessons/{lesson_id}",
    response_model=ApiResponse[PageView],
    summary="Delete Lesson",
)
async def delete_lesson(
        section_id: str, lesson_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = course_editor.delete_lesson(_editor(state), section_id, lesson_id)
    return await page.respond(_with_editor(state, editor))
