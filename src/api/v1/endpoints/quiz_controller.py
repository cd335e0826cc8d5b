import logging
from fastapi import APIRouter, Depends

from src.dependencies.page import PageContext, get_page_context
from src.model.content import Assessment
from src.model.enums import AppView
from src.model.state import AppState
from src.schemas.generic import ApiResponse
from src.schemas.requests import AnswerRequest
from src.schemas.views import PageView
from src.services import navigation_service as navigation
from src.services import quiz_session_service as quiz_session
from src.utils.exceptions import BadRequestException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


def _active_assessment(page: PageContext, state: AppState) -> Assessment:
    assessment = page.sync.find_assessment(state.selected_assessment_id)
    if state.page != AppView.ASSESSMENT_VIEW or state.quiz is None or assessment is None:
        raise BadRequestException("No assessment is in progress")
    return assessment


@router.post(
    "/answer",
    response_model=ApiResponse[PageView],
    summary="Select Answer",
    description="Record (or overwrite) the answer to the current question.",
)
async def select_answer(
        request: AnswerRequest, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load()
    assessment = _active_assessment(page, state)
    quiz = quiz_session.select_answer(state.quiz, assessment, request.option)
    return await page.respond(state.model_copy(update={"quiz": quiz}))


@router.post("/next", response_model=ApiResponse[PageView], summary="Next Question")
async def next_question(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    assessment = _active_assessment(page, state)
    quiz = quiz_session.next_question(state.quiz, assessment)
    return await page.respond(state.model_copy(update={"quiz": quiz}))


@router.post("/prev", response_model=ApiResponse[PageView], summary="Previous Question")
async def previous_question(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    assessment = _active_assessment(page, state)
    quiz = quiz_session.previous_question(state.quiz, assessment)
    return await page.respond(state.model_copy(update={"quiz": quiz}))


@router.post("/submit", response_model=ApiResponse[PageView], summary="Submit Assessment")
async def submit(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    assessment = _active_assessment(page, state)
    quiz = quiz_session.submit(state.quiz, assessment)
    return await page.respond(state.model_copy(update={"quiz": quiz}))


@router.post(
    "/back",
    response_model=ApiResponse[PageView],
    summary="Back To Course",
    description="Leave the quiz for its owning course, or Home if that course is gone.",
)
async def back_to_course(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    assessment = page.sync.find_assessment(state.selected_assessment_id)
    course = page.sync.find_course(assessment.course_id) if assessment else None
    return await page.respond(navigation.back_to_course(state, course))
