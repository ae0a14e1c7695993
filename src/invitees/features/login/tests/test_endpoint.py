"""Tests for the login endpoint."""

from uuid import uuid4

import pytest

from src.invitees.features.login.read_model import DirectoryLoginReadModel
from src.invitees.features.login.router import get_login_read_model
from src.invitees.tests.inmemory_directory import InMemoryIdentityDirectory
from src.invitees.urls import LOGIN_URL


async def build_overrides(directory=None):
    if directory is None:
        directory = InMemoryIdentityDirectory()
        await directory.create(invitee_id=uuid4(), email="a@b.com", phone="+15551234567")
    read_model = DirectoryLoginReadModel(directory=directory)
    return {get_login_read_model: lambda: read_model}


@pytest.mark.asyncio
async def test_login_success(client_factory):
    async with client_factory(await build_overrides()) as client:
        response = await client.post(url=LOGIN_URL, json={"email": "a@b.com", "tel": "+15551234567"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Login successful."}


@pytest.mark.asyncio
async def test_login_missing_phone(client_factory):
    async with client_factory(await build_overrides()) as client:
        response = await client.post(url=LOGIN_URL, json={"email": "a@b.com"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email and phone number are required."}


@pytest.mark.asyncio
async def test_login_wrong_phone(client_factory):
    async with client_factory(await build_overrides()) as client:
        response = await client.post(url=LOGIN_URL, json={"email": "a@b.com", "tel": "+15550000000"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials. User not found."}


@pytest.mark.asyncio
async def test_login_directory_unavailable(client_factory):
    overrides = await build_overrides(InMemoryIdentityDirectory(unavailable=True))

    async with client_factory(overrides) as client:
        response = await client.post(url=LOGIN_URL, json={"email": "a@b.com", "tel": "+15551234567"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error."}


@pytest.mark.asyncio
async def test_login_non_string_phone(client_factory):
    async with client_factory(await build_overrides()) as client:
        response = await client.post(url=LOGIN_URL, json={"email": "a@b.com", "tel": 15551234567})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid tel: Input should be a valid string"}
