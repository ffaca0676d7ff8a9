# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (owner expanded)
  - Blog statistics
  - Get blog by id
  - Create blog (authenticated)
  - Update blog
  - Delete blog (authenticated, owner only, idempotent)

Dependencies
------------
  - `BlogServiceDep`: Service bundling the blog and user repositories.
  - `CurrentUserDep`: Acting user resolved from the bearer token.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, CurrentUserDep, OptionalUserDep
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import BlogOwner, BlogResponse, BlogStatsResponse

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

BlogPayload = Annotated[
    dict[str, Any],
    Body(
        examples=[
            {
                "title": "Go To Statement Considered Harmful",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
                "likes": 5,
            },
        ],
    ),
]


def db_blog_to_response(db_blog: BlogDB, owner: UserDB | None) -> BlogResponse:
    """
    Convert a `BlogDB` and its owner into a `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owning user; only id, username and name are exposed.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=BlogOwner.model_validate(owner) if owner else None,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every blog with its owner's id, username and name.",
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    """
    List all blogs, oldest first.

    Returns
    -------
    list[BlogResponse]
        Blogs with embedded owner subset.
    """
    return [db_blog_to_response(blog, owner) for blog, owner in await service.list_blogs()]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatsResponse,
    summary="Blog statistics",
    description="Number of blogs, total likes and the most liked blog.",
    operation_id="blogs_stats",
)
async def blog_stats(service: BlogServiceDep) -> BlogStatsResponse:
    """Aggregate statistics over all blogs."""
    return BlogStatsResponse.model_validate(await service.stats())


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> BlogResponse:
    """
    Get a blog by its id.

    Raises
    ------
    RecordNotFoundError
        If the blog does not exist.
    """
    blog, owner = await service.get_blog(blog_id)
    return db_blog_to_response(blog, owner)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "title is required",
                        "errors": [{"field": "title", "message": "title is required", "type": "missing"}],
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"detail": "token missing or invalid"}}},
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    payload: BlogPayload,
    service: BlogServiceDep,
    current_user: CurrentUserDep,
) -> BlogResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    payload : dict
        Raw blog fields; validated by the service.
    service : BlogService
        Blog service dependency.
    current_user : UserDB
        Authenticated user, recorded as owner.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    blog = await service.create_blog(current_user, payload)
    return db_blog_to_response(blog, current_user)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update title, author, url or likes of a blog. Not restricted to the owner.",
    responses={
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {"detail": "likes is invalid: must be a non-negative integer"},
                },
            },
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    payload: BlogPayload,
    service: BlogServiceDep,
    acting_user: OptionalUserDep,
) -> BlogResponse:
    """
    Update blog fields.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    payload : dict
        Partial update; unknown keys are ignored.
    service : BlogService
        Blog service dependency.
    acting_user : UserDB | None
        Caller, if authenticated; only logged.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    blog = await service.update_blog(blog_id, payload)
    if acting_user is None or acting_user.id != blog.user_id:
        logger.info(
            "Blog updated by non-owner",
            blog_id=str(blog_id),
            acting_user_id=str(acting_user.id) if acting_user else None,
        )
    return db_blog_to_response(blog, await service.get_owner(blog))


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog owned by the authenticated user. Absent blogs delete successfully.",
    responses={
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"detail": "forbidden - you can only delete your own blog"},
                },
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    service: BlogServiceDep,
    current_user: CurrentUserDep,
) -> Response:
    """
    Delete blog by ID.

    Raises
    ------
    ForbiddenError
        If the blog belongs to another user.
    """
    await service.delete_blog(current_user, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
