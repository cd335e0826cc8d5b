import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from src.dependencies.page import PageContext, get_page_context
from src.schemas.generic import ApiResponse
from src.schemas.requests import BackToCourseRequest
from src.schemas.views import PageView
from src.services import navigation_service as navigation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.post("/home", response_model=ApiResponse[PageView], summary="Go Home")
async def go_home(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(navigation.go_home(state))


@router.post(
    "/courses/{course_id}",
    response_model=ApiResponse[PageView],
    summary="Select Course",
    description="Open a course; an unknown course id falls back to Home.",
)
async def select_course(
        course_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load()
    course = page.sync.find_course(course_id)
    if course is None:
        logger.info(f"Course not found: {course_id}")
        return await page.respond(navigation.go_home(state))
    return await page.respond(navigation.select_course(state, course))


@router.post(
    "/courses/{course_id}/lessons/{lesson_id}",
    response_model=ApiResponse[PageView],
    summary="Select Lesson",
)
async def select_lesson(
        course_id: str, lesson_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load()
    course = page.sync.find_course(course_id)
    lesson = course.find_lesson(lesson_id) if course else None
    if lesson is None:
        logger.info(f"Lesson not found: {course_id}/{lesson_id}")
        return await page.respond(navigation.go_home(state))
    return await page.respond(navigation.select_lesson(state, course, lesson))


@router.post(
    "/back-to-course",
    response_model=ApiResponse[PageView],
    summary="Back To Course",
    description="Return to a course (defaults to the selected one); a deleted course falls back to Home.",
)
async def back_to_course(
        request: Optional[BackToCourseRequest] = Body(None),
        page: PageContext = Depends(get_page_context),
) -> ApiResponse[PageView]:
    state = await page.load()
    course_id = request.course_id if request and request.course_id else state.selected_course_id
    return await page.respond(navigation.back_to_course(state, page.sync.find_course(course_id)))


@router.post("/assessments", response_model=ApiResponse[PageView], summary="Assessment List")
async def go_to_assessment_home(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(navigation.go_to_assessment_home(state))


@router.post(
    "/assessments/{assessment_id}/start",
    response_model=ApiResponse[PageView],
    summary="Start Assessment",
)
async def start_assessment(
        assessment_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(
        navigation.start_assessment(state, assessment_id, page.sync.assessments)
    )


@router.post("/blogs", response_model=ApiResponse[PageView], summary="Blog List")
async def go_to_blog_home(page: PageContext = Depends(get_page_context)) -> ApiResponse[PageView]:
    state = await page.load()
    return await page.respond(navigation.go_to_blog_home(state))


@router.post("/blogs/{blog_id}", response_model=ApiResponse[PageView], summary="Select Blog Post")
async def select_blog(
        blog_id: str, page: PageContext = Depends(get_page_context)
) -> ApiResponse[PageView]:
    state = await page.load()
    blog = page.sync.find_blog(blog_id)
    if blog is None:
        logger.info(f"Blog post not found: {blog_id}")
        return await page.respond(navigation.go_to_blog_home(state))
    return await page.respond(navigation.select_blog(state, blog))
