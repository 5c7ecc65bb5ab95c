"""
Exception handlers - map domain errors to HTTP responses.
422 bodies go through content negotiation; every other error has an empty body.
"""

from fastapi import FastAPI, Request, Response, status

from app.api.negotiation import render
from app.core.exceptions import NotAcceptable, UserApiError, ValidationFailure


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> Response:
    try:
        return render(request, exc.errors, xml_root="Errors", status_code=exc.status_code)
    except NotAcceptable:
        return Response(status_code=status.HTTP_406_NOT_ACCEPTABLE)


async def user_api_error_handler(request: Request, exc: UserApiError) -> Response:
    return Response(status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Most specific class wins (Starlette looks handlers up along the MRO)."""
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(UserApiError, user_api_error_handler)
