"""
Service layer for training management.

A session seats at most its program's ``maxParticipants``.  Completing
a training with a score of 60 or more passes it; anything lower fails.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.training import (
    EnrollmentCreate,
    ProgramCreate,
    ProgramStatus,
    SessionCreate,
    SessionStatus,
    TrainingEnrollment,
    TrainingMetrics,
    TrainingProgram,
    TrainingSession,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

PASSING_SCORE = 60

programs: InMemoryStore[TrainingProgram] = InMemoryStore("training.programs")
sessions: InMemoryStore[TrainingSession] = InMemoryStore("training.sessions")
enrollments: InMemoryStore[TrainingEnrollment] = InMemoryStore("training.enrollments")


class TrainingService:
    @classmethod
    async def create_program(cls, company_id: str, data: ProgramCreate) -> TrainingProgram:
        program = programs.add(TrainingProgram(company_id=company_id, **data.model_dump()))
        logger.info("Training program created: %s", program.program_name)
        return program

    @classmethod
    async def update_program_status(cls, company_id: str, program_id: str, status: ProgramStatus) -> Optional[TrainingProgram]:
        program = programs.get_owned(program_id, company_id)
        if program is None:
            return None
        program.status = status
        return program

    @classmethod
    async def create_session(cls, company_id: str, data: SessionCreate) -> TrainingSession:
        if programs.get_owned(data.program_id, company_id) is None:
            raise not_found("Program not found")
        session = sessions.add(TrainingSession(company_id=company_id, **data.model_dump()))
        logger.info("Training session created for program %s with %s", session.program_id, session.instructor)
        return session

    @classmethod
    async def update_session_status(cls, company_id: str, session_id: str, status: SessionStatus) -> Optional[TrainingSession]:
        session = sessions.get_owned(session_id, company_id)
        if session is None:
            return None
        session.status = status
        return session

    @classmethod
    async def enroll_employee(cls, company_id: str, data: EnrollmentCreate) -> TrainingEnrollment:
        session = sessions.get_owned(data.session_id, company_id)
        if session is None:
            raise not_found("Session not found")
        if session.status == "completed":
            raise invalid_state("Session is already completed")
        program = programs.get_owned(session.program_id, company_id)
        if program is not None and session.enrolled_count >= program.max_participants:
            raise business_rule_violation("Session is full")
        enrollment = enrollments.add(TrainingEnrollment(company_id=company_id, **data.model_dump()))
        session.enrolled_count += 1
        logger.info("Employee %s enrolled in session %s", enrollment.employee_id, session.id)
        return enrollment

    @classmethod
    async def complete_training(cls, company_id: str, enrollment_id: str, score: float) -> Optional[TrainingEnrollment]:
        enrollment = enrollments.get_owned(enrollment_id, company_id)
        if enrollment is None:
            return None
        if enrollment.status in ("completed", "failed"):
            raise invalid_state(f"Training is already {enrollment.status}")
        enrollment.score = score
        enrollment.status = "completed" if score >= PASSING_SCORE else "failed"
        enrollment.completion_date = datetime.utcnow()
        if enrollment.status == "completed":
            session = sessions.get_owned(enrollment.session_id, company_id)
            if session is not None:
                session.completed_count += 1
        logger.info("Training %s for employee %s (score %.0f)", enrollment.status, enrollment.employee_id, score)
        await AuditService.record(enrollment.status, "training_enrollment", enrollment, score=score)
        return enrollment

    @classmethod
    async def get_programs(cls, company_id: str, status: Optional[str] = None) -> List[TrainingProgram]:
        return programs.filter(company_id=company_id, status=status)

    @classmethod
    async def get_sessions(cls, company_id: str, program_id: Optional[str] = None) -> List[TrainingSession]:
        return sessions.filter(company_id=company_id, program_id=program_id)

    @classmethod
    async def get_enrollments(cls, company_id: str, employee_id: Optional[str] = None) -> List[TrainingEnrollment]:
        return enrollments.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> TrainingMetrics:
        company_programs = programs.filter(company_id=company_id)
        company_sessions = sessions.filter(company_id=company_id)
        company_enrollments = enrollments.filter(company_id=company_id)
        completed = sum(1 for e in company_enrollments if e.status == "completed")
        total = len(company_enrollments)
        return TrainingMetrics(
            total_programs=len(company_programs),
            active_programs=sum(1 for p in company_programs if p.status == "active"),
            total_sessions=len(company_sessions),
            completed_sessions=sum(1 for s in company_sessions if s.status == "completed"),
            total_enrollments=total,
            completed_enrollments=completed,
            average_score=sum(e.score for e in company_enrollments) / total if total else 0,
            completion_rate=completed / total * 100 if total else 0,
        )
