from uuid import uuid4

import pytest

from src.invitees.dtos import InviteeNotFoundError, MissingCredentialsError
from src.invitees.features.login.read_model import DirectoryLoginReadModel
from src.invitees.tests.inmemory_directory import InMemoryIdentityDirectory


async def directory_with_invitee():
    directory = InMemoryIdentityDirectory()
    await directory.create(invitee_id=uuid4(), email="a@b.com", phone="+15551234567")
    return directory


@pytest.mark.asyncio
async def test_authenticate_matching_invitee():
    directory = await directory_with_invitee()
    read_model = DirectoryLoginReadModel(directory=directory)

    summary = await read_model.authenticate(email="a@b.com", phone="+15551234567")

    assert summary.email == "a@b.com"
    assert summary.id == directory.invitees["a@b.com"].id


@pytest.mark.asyncio
async def test_authenticate_wrong_phone_is_not_found():
    read_model = DirectoryLoginReadModel(directory=await directory_with_invitee())

    with pytest.raises(InviteeNotFoundError):
        await read_model.authenticate(email="a@b.com", phone="+15550000000")


@pytest.mark.asyncio
@pytest.mark.parametrize("email,phone", [("", "+15551234567"), ("a@b.com", None)])
async def test_authenticate_missing_credentials(email, phone):
    read_model = DirectoryLoginReadModel(directory=await directory_with_invitee())

    with pytest.raises(MissingCredentialsError):
        await read_model.authenticate(email=email, phone=phone)
