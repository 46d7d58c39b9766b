"""Outbound adapter served through a FastAPI app over httpx ASGITransport."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from http import HTTPStatus

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
import pytest

from errorvalue import (
    Result,
    Severity,
    TypedResult,
    to_api_response,
    to_minimal_api_response,
)

pytestmark = pytest.mark.integration


class User(BaseModel):
    name: str


app = FastAPI()


@app.get("/users/{name}")
async def get_user(name: str):
    result: TypedResult[User] = TypedResult(User)
    if name == "ghost":
        result.set(
            message="user not found",
            severity=Severity.ERROR,
            code=HTTPStatus.NOT_FOUND,
        )
    else:
        result.set(value=User(name=name), message="loaded")
    return to_api_response(result)


@app.delete("/users/{name}")
async def delete_user(name: str):
    result = Result()
    if name == "ghost":
        result.set(message="gone", severity=Severity.ERROR, code=HTTPStatus.NOT_FOUND)
    else:
        result.set(message="deleted", code=HTTPStatus.ACCEPTED)
    return to_minimal_api_response(result)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_found_user_body(client: AsyncClient) -> None:
    resp = await client.get("/users/ada")
    assert resp.status_code == 200
    assert resp.json() == {
        "value": {"name": "ada"},
        "messages": [{"message": "loaded", "severity": "Information"}],
    }


@pytest.mark.asyncio
async def test_missing_user_body_has_no_value(client: AsyncClient) -> None:
    resp = await client.get("/users/ghost")
    assert resp.status_code == 404
    assert resp.json() == {
        "messages": [{"message": "user not found", "severity": "Error"}]
    }


@pytest.mark.asyncio
async def test_minimal_response_is_served_with_result_code(client: AsyncClient) -> None:
    resp = await client.delete("/users/ghost")
    assert resp.status_code == 404
    assert resp.json() == {"messages": [{"message": "gone", "severity": "Error"}]}


@pytest.mark.asyncio
async def test_minimal_response_success_code(client: AsyncClient) -> None:
    resp = await client.delete("/users/ada")
    assert resp.status_code == 202
    assert resp.json() == {
        "messages": [{"message": "deleted", "severity": "Information"}]
    }
