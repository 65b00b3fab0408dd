"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, Request

from student_records.core.config import Settings
from student_records.core.store import StoreGateway
from student_records.services.student import StudentService
from student_records.services.upload import UploadService


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_store(request: Request) -> StoreGateway:
    """Store gateway shared by the application."""
    return request.app.state.store


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Store = Annotated[StoreGateway, Depends(get_store)]


def get_student_service(store: Store, settings: AppSettings) -> StudentService:
    return StudentService(store, settings.uploads_folder_name)


def get_upload_service(store: Store, settings: AppSettings) -> UploadService:
    return UploadService(store, settings)
