from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .appointments.service import AppointmentService
from .appointments.sqlalchemy_appointment_repository import SQLAlchemyAppointmentRepository
from .calendars.service import CalendarService
from .documents.service import DocumentService
from .documents.sqlalchemy_document_repository import SQLAlchemyDocumentRepository
from .documents.storage import LocalFileStorage
from .feedback.service import FeedbackService
from .feedback.sqlalchemy_feedback_repository import SQLAlchemyFeedbackRepository
from .messages.service import MessageService
from .messages.sqlalchemy_message_repository import SQLAlchemyMessageRepository
from .tasks.service import TaskService
from .tasks.sqlalchemy_task_repository import SQLAlchemyTaskRepository
from .users.service import AuthService, UserService
from .users.sqlalchemy_user_repository import SQLAlchemyCredentialRepository, SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    credentials_repo: SQLAlchemyCredentialRepository
    users_repo: SQLAlchemyUserRepository
    tasks_repo: SQLAlchemyTaskRepository
    documents_repo: SQLAlchemyDocumentRepository
    appointments_repo: SQLAlchemyAppointmentRepository
    feedback_repo: SQLAlchemyFeedbackRepository
    messages_repo: SQLAlchemyMessageRepository

    auth_service: AuthService
    user_service: UserService
    task_service: TaskService
    document_service: DocumentService
    appointment_service: AppointmentService
    feedback_service: FeedbackService
    message_service: MessageService
    calendar_service: CalendarService


def build_container(*, upload_dir: str | Path, session=None) -> Container:
    credentials_repo = SQLAlchemyCredentialRepository(session)
    users_repo = SQLAlchemyUserRepository(session)
    tasks_repo = SQLAlchemyTaskRepository(session)
    documents_repo = SQLAlchemyDocumentRepository(session)
    appointments_repo = SQLAlchemyAppointmentRepository(session)
    feedback_repo = SQLAlchemyFeedbackRepository(session)
    messages_repo = SQLAlchemyMessageRepository(session)

    return Container(
        credentials_repo=credentials_repo,
        users_repo=users_repo,
        tasks_repo=tasks_repo,
        documents_repo=documents_repo,
        appointments_repo=appointments_repo,
        feedback_repo=feedback_repo,
        messages_repo=messages_repo,
        auth_service=AuthService(credentials_repo, users_repo),
        user_service=UserService(users_repo),
        task_service=TaskService(tasks_repo, users_repo),
        document_service=DocumentService(documents_repo, users_repo, LocalFileStorage(upload_dir)),
        appointment_service=AppointmentService(appointments_repo, users_repo),
        feedback_service=FeedbackService(feedback_repo, users_repo),
        message_service=MessageService(messages_repo, users_repo),
        calendar_service=CalendarService(tasks_repo, appointments_repo, users_repo),
    )
