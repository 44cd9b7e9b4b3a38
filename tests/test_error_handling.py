"""
Test error responses.
"""
import pytest
from fastapi import APIRouter
from httpx import AsyncClient, ASGITransport
from pymongo.errors import ServerSelectionTimeoutError, WriteError

from employee_api.exceptions import ValidationError
from employee_api.main import create_app


class BrokenCollection:
    """Collection whose every call fails like an unreachable server."""
    
    name = "employees"
    
    async def insert_one(self, document):
        raise WriteError("document failed validation", code=121)
    
    async def find_one(self, query):
        raise ServerSelectionTimeoutError("no servers")
    
    def find(self, query=None):
        raise ServerSelectionTimeoutError("no servers")
    
    async def delete_one(self, query):
        raise ServerSelectionTimeoutError("no servers")


class BrokenDatabase:
    def __getitem__(self, name):
        return BrokenCollection()


@pytest.fixture
async def broken_client():
    app = create_app(database=BrokenDatabase())
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestStoreFailures:
    
    async def test_rejected_write_returns_empty_400(self, broken_client, employee_payload):
        response = await broken_client.post("/employees", json=employee_payload)
        assert response.status_code == 400
        assert response.content == b""
    
    async def test_listing_failure_returns_500(self, broken_client):
        response = await broken_client.get("/employees")
        assert response.status_code == 500
        assert response.json() == {
            "error": "InternalServerError",
            "message": "An unexpected error occurred"
        }
    
    async def test_read_failure_returns_500(self, broken_client):
        response = await broken_client.get("/employees/5f1d7f0e9b1e8a3c4d2b6a10")
        assert response.status_code == 500
    
    async def test_delete_failure_returns_500(self, broken_client):
        response = await broken_client.delete("/employees/5f1d7f0e9b1e8a3c4d2b6a10")
        assert response.status_code == 500
    
    async def test_ping_still_answers(self, broken_client):
        response = await broken_client.get("/ping")
        assert response.status_code == 200


class TestExceptionHandlers:
    
    async def test_app_error_rendered_as_json(self, db):
        app = create_app(database=db)
        router = APIRouter()
        
        @router.get("/boom")
        async def boom():
            raise ValidationError("bad input", details={"field": "name"})
        
        app.include_router(router)
        
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")
        
        assert response.status_code == 400
        assert response.json() == {
            "error": "ValidationError",
            "message": "bad input",
            "details": {"field": "name"}
        }
    
    async def test_unknown_route(self, client):
        response = await client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["error"] == "HTTPException"
    
    async def test_method_not_allowed(self, client):
        response = await client.put("/employees")
        assert response.status_code == 405
