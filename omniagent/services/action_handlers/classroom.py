"""
Classroom Handler - Google Classroom courses, coursework and rosters.

Assignment and student lookups take a ``courseId`` or resolve
``courseName`` against the user's active courses.
"""

import logging
from typing import Dict, List, Optional

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import ActionHandler, HandlerContext, RouteFn
from omniagent.services.reference_resolver import ReferenceResolver, ResolvedReference

logger = logging.getLogger("omniagent.services.action_handlers.classroom")


class ClassroomHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "classroom"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.FETCH_COURSES,
            ActionTag.FETCH_ASSIGNMENTS,
            ActionTag.FETCH_STUDENTS,
            ActionTag.CREATE_COURSE,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_COURSES: self._fetch_courses,
            ActionTag.FETCH_ASSIGNMENTS: self._fetch_assignments,
            ActionTag.FETCH_STUDENTS: self._fetch_students,
            ActionTag.CREATE_COURSE: self._create_course,
        }

    async def _fetch_courses(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        courses = await context.collaborators.classroom.list_courses(token, self.limit(intent, 10))
        return self.respond(intent.action, f"✅ Found {len(courses)} active classes.", courses)

    async def _fetch_assignments(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        course = await self._resolve_course(intent, context, token)
        if not course.id:
            return self._course_not_found(intent, course)

        assignments = await context.collaborators.classroom.list_assignments(
            token, course.id, self.limit(intent, 10)
        )
        return self.respond(
            intent.action,
            f"✅ Found {len(assignments)} assignments in \"{course.name}\".",
            assignments,
        )

    async def _fetch_students(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        course = await self._resolve_course(intent, context, token)
        if not course.id:
            return self._course_not_found(intent, course)

        students = await context.collaborators.classroom.list_students(token, course.id)
        wanted = intent.parameters.student_name
        if wanted:
            students = [s for s in students if _matches_student(s, wanted)]

        return self.respond(
            intent.action,
            f"✅ Found {len(students)} students in \"{course.name}\".",
            students,
        )

    async def _create_course(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        name = params.name or params.title
        if not name:
            return self.respond(intent.action, "Please provide a name for the classroom.")

        token = await context.google_token()
        course = await context.collaborators.classroom.create_course(
            token,
            name=name,
            section=params.section,
            description=params.description,
            room=params.room,
        )
        return self.respond(
            intent.action,
            f"✅ Class \"{course.get('name', name)}\" created! Enrollment code: {course.get('enrollmentCode', 'N/A')}",
            course,
        )

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    async def _resolve_course(intent: Intent, context: HandlerContext, token: str) -> ResolvedReference:
        resolver = ReferenceResolver(context.collaborators.classroom.list_by_name, placeholder="Class")
        return await resolver.resolve(
            token,
            display_name=intent.parameters.course_name,
            explicit_id=intent.parameters.course_id,
        )

    def _course_not_found(self, intent: Intent, course: ResolvedReference) -> ActionResponse:
        if not course.name:
            return self.respond(intent.action, "Which class? Please give the class name or id.")
        return self.respond(intent.action, f"❌ Could not find a class named \"{course.name}\".")


def _matches_student(student: dict, wanted: str) -> bool:
    full_name: Optional[str] = student.get("profile", {}).get("name", {}).get("fullName")
    return bool(full_name) and wanted.lower() in full_name.lower()
