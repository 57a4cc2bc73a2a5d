"""
Course response mapping utilities.

Transforms service result dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: chaseplus_backend.models.course
System role: Course response transformation
"""

from typing import Any

from chaseplus_backend.models.course import CoursePageResponse, CourseResponse, CourseSummary


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary returned by CourseService

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """Transform list of course dictionaries into list of CourseResponse."""
    return [map_course_to_response(course) for course in courses_data]


def map_course_page_to_response(page_data: dict[str, Any]) -> CoursePageResponse:
    """
    Transform a paged listing dictionary into CoursePageResponse.

    Args:
        page_data: Dictionary with items, page, limit, total, total_pages, search

    Returns:
        CoursePageResponse: Pydantic model for API response
    """
    return CoursePageResponse(
        **{**page_data, "items": map_courses_to_response(page_data["items"])}
    )


def map_course_summaries(summaries: list[dict[str, Any]]) -> list[CourseSummary]:
    """Transform id/title dictionaries into CourseSummary models."""
    return [CourseSummary(**summary) for summary in summaries]
