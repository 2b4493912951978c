"""
Google Classroom API client - courses, coursework and rosters.

API Reference: https://developers.google.com/classroom/reference/rest
"""

import logging
from typing import List, Optional

from omniagent.environments.base import NamedItem, RestClient


logger = logging.getLogger("omniagent.environments.google.classroom")


class ClassroomClient(RestClient):
    service_name = "Google Classroom"
    BASE_URL = "https://classroom.googleapis.com/v1"

    async def list_courses(self, token: str, limit: int) -> List[dict]:
        data = await self._make_request(
            "GET",
            "/courses",
            token,
            params={"pageSize": limit, "courseStates": "ACTIVE"},
        )
        return (data or {}).get("courses", [])

    async def list_by_name(self, token: str, name: str, type_hint: Optional[str] = None) -> List[NamedItem]:
        """Active courses whose name contains ``name`` (case-insensitive)."""
        needle = name.lower()
        courses = await self.list_courses(token, limit=100)
        return [
            NamedItem(id=c["id"], name=c.get("name", ""))
            for c in courses
            if needle in c.get("name", "").lower()
        ]

    async def list_assignments(self, token: str, course_id: str, limit: int) -> List[dict]:
        data = await self._make_request(
            "GET",
            f"/courses/{course_id}/courseWork",
            token,
            params={"pageSize": limit},
        )
        return (data or {}).get("courseWork", [])

    async def list_students(self, token: str, course_id: str) -> List[dict]:
        data = await self._make_request("GET", f"/courses/{course_id}/students", token)
        return (data or {}).get("students", [])

    async def create_course(
        self,
        token: str,
        name: str,
        section: Optional[str] = None,
        description: Optional[str] = None,
        room: Optional[str] = None,
    ) -> dict:
        body = {"name": name, "ownerId": "me", "courseState": "PROVISIONED"}
        if section:
            body["section"] = section
        if description:
            body["description"] = description
        if room:
            body["room"] = room

        course = await self._make_request("POST", "/courses", token, json_body=body)
        logger.info(f"Created course {course.get('id')}")
        return course
