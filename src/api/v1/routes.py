"""
API v1 routes.

Adapts HTTP requests to the framework-agnostic SignUpController.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.controllers.signup import SignUpController
from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse, SignUpBody
from src.api.protocols import HttpRequest, HttpResponse
from src.domain.exceptions import FieldError, SignUpError
from src.domain.models import UserAccount

router = APIRouter(tags=["v1"])


def to_content(http_response: HttpResponse) -> dict[str, Any]:
    """Serialize a controller response body to JSON-compatible data."""
    body = http_response.body
    if isinstance(body, FieldError):
        return ErrorResponse(detail=str(body), field=body.field_name).model_dump()
    if isinstance(body, SignUpError):
        return ErrorResponse(detail=str(body)).model_dump()
    if isinstance(body, UserAccount):
        return AccountResponse(id=body.id, name=body.name, email=body.email).model_dump()
    raise TypeError(f"Unsupported response body: {type(body).__name__}")


async def read_body(request: Request) -> dict[str, Any]:
    """Read the JSON body; malformed or non-object payloads become an empty map."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid field"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new user",
    description="Submit name, email, password and passwordConfirmation to create an account.",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": SignUpBody.model_json_schema()}},
            "required": True,
        }
    },
)
async def signup(
    request: Request,
    controller: SignUpController = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create a user account.

    Field checks run in order: presence, password, confirmation, email.
    The first failure is returned as 400 with the offending field.
    """
    http_response = await controller.handle(HttpRequest(body=await read_body(request)))
    return JSONResponse(status_code=http_response.status_code, content=to_content(http_response))
