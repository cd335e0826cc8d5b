from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.dependencies.services import get_crud_gateway
from src.model.enums import AdminView
from src.model.state import AppState, AssessmentEditorState
from src.schemas.generic import ApiResponse
from src.schemas.requests import AssessmentFieldsRequest, OptionRequest, QuestionFormRequest
from src.schemas.views import PageView
from src.services import assessment_editor
from src.services import navigation_service as navigation
from src.services.crud_gateway import CrudGateway
from src.utils.exceptions import BadRequestException, ResourceNotFoundException

router = APIRouter(prefix="/admin/assessments", tags=["Admin Assessments"])


def _editor(state: AppState) -> AssessmentEditorState:
    if state.assessment_editor is None:
        raise BadRequestException("No assessment is being edited")
    return state.assessment_editor


def _with_editor(state: AppState, editor: AssessmentEditorState) -> AppState:
    return state.model_copy(update={"assessment_editor": editor})


@router.post(
    "/new",
    response_model=ApiResponse[PageView],
    summary="New Assessment Draft",
    description="Start a new assessment attached to the first course, if any.",
)
async def create_assessment(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.start_create(page.sync.courses)
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.ASSESSMENTS, assessment_editor=editor)
    )


@router.post("/{assessment_id}/edit", response_model=ApiResponse[PageView], summary="Edit Assessment")
async def edit_assessment(
        assessment_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    assessment = page.sync.find_assessment(assessment_id)
    if assessment is None:
        raise ResourceNotFoundException(f"Assessment not found: {assessment_id}")
    editor = assessment_editor.start_edit(assessment)
    return await page.respond(
        navigation.open_admin_panel(state, AdminView.ASSESSMENTS, assessment_editor=editor)
    )


@router.patch("/draft", response_model=ApiResponse[PageView], summary="Update Assessment Fields")
async def update_fields(
        request: AssessmentFieldsRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.update_fields(_editor(state), **request.model_dump(exclude_unset=True))
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/commit", response_model=ApiResponse[PageView], summary="Save Assessment")
async def commit(
        page: PageContext = Depends(get_page_context),
        gateway: CrudGateway = Depends(get_crud_gateway),
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(await gateway.commit_assessment(state))


@router.post("/draft/cancel", response_model=ApiResponse[PageView], summary="Discard Assessment Draft")
async def cancel(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    return await page.respond(_with_editor(state, None))


# =============================
#   Question form
# =============================
@router.post("/draft/question-form", response_model=ApiResponse[PageView], summary="Open Question Form")
async def open_question_form(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.open_question_form(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.patch("/draft/question-form", response_model=ApiResponse[PageView], summary="Update Question Form")
async def update_question_form(
        request: QuestionFormRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.update_question_form(_editor(state), request.text, request.answer)
    return await page.respond(_with_editor(state, editor))


@router.put(
    "/draft/question-form/options",
    response_model=ApiResponse[PageView],
    summary="Set Option",
    description="Write one option slot; writing just past the last slot adds one (up to four).",
)
async def set_option(
        request: OptionRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.set_option(_editor(state), request.index, request.value)
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/question-form/add", response_model=ApiResponse[PageView], summary="Add Question")
async def add_question(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.add_question(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.post("/draft/question-form/cancel", response_model=ApiResponse[PageView], summary="Cancel Question Form")
async def cancel_question_form(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.cancel_question_form(_editor(state))
    return await page.respond(_with_editor(state, editor))


@router.delete("/draft/questions/{question_id}", response_model=ApiResponse[PageView], summary="Delete Question")
async def delete_question(
        question_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load_admin()
    editor = assessment_editor.delete_question(_editor(state), question_id)
    return await page.respond(_with_editor(state, editor))
