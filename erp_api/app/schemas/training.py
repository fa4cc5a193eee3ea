"""Pydantic schemas for training programs, sessions and enrollments."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

ProgramStatus = Literal["draft", "active", "completed", "cancelled"]
SessionStatus = Literal["scheduled", "in-progress", "completed"]


class ProgramCreate(CamelModel):
    program_code: str = code_field("TRN")
    program_name: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    duration: float = Field(0, ge=0, description="Hours")
    max_participants: int = Field(..., gt=0)
    start_date: date
    end_date: date


class TrainingProgram(Record, ProgramCreate):
    status: ProgramStatus = "draft"


class ProgramStatusUpdate(CamelModel):
    program_id: str
    status: ProgramStatus


class SessionCreate(CamelModel):
    program_id: str
    session_code: str = code_field("SES")
    instructor: str = Field(..., min_length=1)
    location: str = ""
    start_date: datetime
    end_date: datetime


class TrainingSession(Record, SessionCreate):
    enrolled_count: int = 0
    completed_count: int = 0
    status: SessionStatus = "scheduled"


class SessionStatusUpdate(CamelModel):
    session_id: str
    status: SessionStatus


class EnrollmentCreate(CamelModel):
    employee_id: str
    session_id: str


class TrainingEnrollment(Record, EnrollmentCreate):
    enrollment_date: datetime = Field(default_factory=datetime.utcnow)
    completion_date: Optional[datetime] = None
    score: float = 0
    status: Literal["enrolled", "in-progress", "completed", "failed"] = "enrolled"


class TrainingResult(CamelModel):
    enrollment_id: str
    score: float = Field(..., ge=0, le=100)


class TrainingMetrics(CamelModel):
    total_programs: int
    active_programs: int
    total_sessions: int
    completed_sessions: int
    total_enrollments: int
    completed_enrollments: int
    average_score: float
    completion_rate: float
