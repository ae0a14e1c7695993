import logging

from fastapi import APIRouter, Depends

from src.errors import ValidationError
from src.invitees.dtos import DirectoryError
from src.invitees.features.register.dtos import RegisterRequest, RegisterResponse
from src.invitees.features.register.write_model import (
    DirectoryRegisterWriteModel,
    RegisterWriteModel,
)
from src.invitees.repository.directory import IdentityDirectory, get_identity_directory
from src.invitees.urls import REGISTER_URL
from src.notifications import NotificationDispatcher, get_dispatcher, get_welcome_channels
from src.routers.errors import ErrorResponse, error_response

logger = logging.getLogger(__name__)

router = APIRouter()


def get_register_write_model(
    directory: IdentityDirectory = Depends(get_identity_directory),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> RegisterWriteModel:
    """Dependency to get register write model instance."""
    return DirectoryRegisterWriteModel(
        directory=directory,
        dispatcher=dispatcher,
        channels=get_welcome_channels(),
    )


@router.post(
    REGISTER_URL,
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register(
    request: RegisterRequest,
    write_model: RegisterWriteModel = Depends(get_register_write_model),
):
    """
    Register an invitee and send the welcome email and SMS.

    Notification failures are logged and do not fail the registration.
    """
    try:
        await write_model.register(email=request.email, phone=request.tel)
    except ValidationError as e:
        return error_response(400, e.message)
    except DirectoryError as e:
        logger.error(f"Registration failed: {e}")
        return error_response(500, e.message)
    except Exception as e:
        logger.exception("Unexpected registration failure")
        return error_response(500, str(e))

    return RegisterResponse(message="User registered successfully.")
