import logging

from fastapi import APIRouter, Depends

from src.invitees.dtos import InviteeNotFoundError, MissingCredentialsError
from src.invitees.features.login.dtos import LoginRequest, LoginResponse
from src.invitees.features.login.read_model import DirectoryLoginReadModel, LoginReadModel
from src.invitees.repository.directory import IdentityDirectory, get_identity_directory
from src.invitees.urls import LOGIN_URL
from src.routers.errors import ErrorResponse, error_response

logger = logging.getLogger(__name__)

router = APIRouter()


def get_login_read_model(
    directory: IdentityDirectory = Depends(get_identity_directory),
) -> LoginReadModel:
    """Dependency to get login read model instance."""
    return DirectoryLoginReadModel(directory=directory)


@router.post(
    LOGIN_URL,
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(
    request: LoginRequest,
    read_model: LoginReadModel = Depends(get_login_read_model),
):
    """Check that an invitee with this exact email and phone exists."""
    try:
        await read_model.authenticate(email=request.email, phone=request.tel)
    except MissingCredentialsError as e:
        return error_response(400, e.message)
    except InviteeNotFoundError as e:
        return error_response(401, e.message)
    except Exception:
        logger.exception("Login Error")
        return error_response(500, "Internal Server Error.")

    return LoginResponse(success=True, message="Login successful.")
