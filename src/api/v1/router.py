from fastapi import APIRouter

from src.api.v1.endpoints import (
    admin_controller,
    assessment_editor_controller,
    blog_editor_controller,
    course_editor_controller,
    navigation_controller,
    page_controller,
    quiz_controller,
)

api_router = APIRouter()

api_router.include_router(page_controller.router)
api_router.include_router(navigation_controller.router)
api_router.include_router(quiz_controller.router)

# Editor routes first: /admin/{collection}/{doc_id} is a catch-all
api_router.include_router(course_editor_controller.router)
api_router.include_router(assessment_editor_controller.router)
api_router.include_router(blog_editor_controller.router)
api_router.include_router(admin_controller.router)
