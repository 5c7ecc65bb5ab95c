"""
User endpoints - the /api/users resource (RESTful API).
Challenge: Exact status codes, Location/Allow/X-Pagination headers, content negotiation.
Design: Thin controller; UserService holds the decisions, errors are raised and handled centrally.
"""

from fastapi import APIRouter, Query, Request, Response, status

from app.api.negotiation import content_type_for, render
from app.core.dependencies import AppSettings, JsonBody, UserId, Users
from app.services.pagination import build_metadata, clamp_page_request

router = APIRouter()

ALLOWED_COLLECTION_METHODS = "POST, GET, OPTIONS"


def _created(request: Request, user_id) -> Response:
    """201 with Location pointing at GET /users/{id} and the id as body."""
    location = str(request.url_for("get_user_by_id", user_id=str(user_id)))
    return render(
        request,
        user_id,
        xml_root="guid",
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location},
    )


@router.api_route("/{user_id}", methods=["GET", "HEAD"], name="get_user_by_id")
async def get_user_by_id(request: Request, user_id: UserId, users: Users):
    """Fetch one user. HEAD does the same lookup and answers with headers only."""
    user = users.get_by_id(user_id)
    if request.method == "HEAD":
        return Response(status_code=status.HTTP_200_OK, headers={"Content-Type": content_type_for(request)})
    return render(request, user, xml_root="UserDto")


@router.post("", name="create_user")
async def create_user(request: Request, body: JsonBody, users: Users):
    """Create user: 400 without body, 422 on invalid fields or login charset, 201 otherwise."""
    user_id = users.create(body)
    return _created(request, user_id)


@router.put("/{user_id}", name="update_user")
async def update_user(request: Request, user_id: UserId, body: JsonBody, users: Users):
    """Replace user or create it under the given id (201 when created, 204 when replaced)."""
    is_inserted = users.replace_or_create(user_id, body)
    if is_inserted:
        return _created(request, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}", name="partially_update_user")
async def partially_update_user(user_id: UserId, body: JsonBody, users: Users):
    """Apply a JSON Patch document (array of operations) and validate the result."""
    users.partially_update(user_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", name="delete_user")
async def delete_user(user_id: UserId, users: Users):
    users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", name="get_users")
async def get_users(
    request: Request,
    users: Users,
    settings: AppSettings,
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
):
    """List users. REST: GET /users?pageNumber=1&pageSize=10, metadata in X-Pagination."""
    if page_size is None:
        page_size = settings.default_page_size
    page_number, page_size = clamp_page_request(page_number, page_size, settings.max_page_size)
    user_dtos, page = users.list_users(page_number, page_size)

    def link_to(number: int, size: int) -> str:
        return str(request.url_for("get_users").include_query_params(pageNumber=number, pageSize=size))

    metadata = build_metadata(page_number, page_size, page.total_count, link_to)
    return render(
        request,
        user_dtos,
        xml_root="ArrayOfUserDto",
        headers={"X-Pagination": metadata.to_header()},
    )


@router.options("", name="options_users")
async def options_users():
    """Advertise the methods the collection supports."""
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": ALLOWED_COLLECTION_METHODS})
