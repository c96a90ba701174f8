"""
Blog Routes.

Provides the listing and CRUD endpoints for blogs.

Summary
-------
Endpoints include:
  - List blogs
  - Create blog (bearer token)
  - Update blog
  - Delete blog (bearer token, owner only)

Dependencies
------------
  - `BlogRepoDep`: Repository bound to the request's database session.
  - `CurrentUserDep`: User resolved from the `Authorization: Bearer` header.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, CurrentUserDep
from bloglist.errors import AuthorizationError
from bloglist.models import BlogDB
from bloglist.monitoring import get_logger
from bloglist.schemas import BlogCreate, BlogResponse, BlogUpdate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174111",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
}

TOKEN_INVALID_RESPONSE = {
    "description": "Missing or invalid bearer token",
    "content": {"application/json": {"example": {"error": "token invalid"}}},
}

MALFORMATTED_ID_RESPONSE = {
    "description": "Malformed or unknown blog id",
    "content": {"application/json": {"example": {"error": "malformatted id"}}},
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance, with its owner loaded, to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    status_code=HTTP_200_OK,
    summary="List blogs",
    description="Return every blog with its owner's public fields.",
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
    },
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    """
    List all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        Every stored blog, empty when there are none.
    """
    blogs = await repo.get_all()
    return [db_blog_to_response(blog) for blog in blogs]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {"description": "Title or url missing (empty body)"},
        401: TOKEN_INVALID_RESPONSE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
    blog: Annotated[
        BlogCreate | None,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ] = None,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated owner of the new blog.
    blog : BlogCreate | None
        Blog input payload; a request without a body counts as an empty blog.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    PostValidationError
        If title or url is missing.
    """
    db_blog = await repo.create(blog or BlogCreate(), current_user)
    return db_blog_to_response(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_200_OK,
    summary="Update blog",
    description="Replace the provided fields of a blog.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMATTED_ID_RESPONSE,
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog_update: Annotated[
        BlogUpdate,
        Body(examples=[{"likes": 8}]),
    ],
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Update an existing blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Fields to replace.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Updated blog data.

    Raises
    ------
    CastError
        If the identifier is malformed.
    RecordNotFoundError
        If blog not found.
    """
    db_blog = await repo.update(blog_id, blog_update)
    return db_blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog owned by the authenticated user.",
    responses={
        204: {"description": "Blog deleted"},
        400: MALFORMATTED_ID_RESPONSE,
        401: {
            "description": "Not the owner, or missing/invalid bearer token",
            "content": {"application/json": {"example": {"error": "user not authorized"}}},
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> Response:
    """
    Delete a blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated caller, who must own the blog.

    Returns
    -------
    Response
        Empty 204 response.

    Raises
    ------
    AuthorizationError
        If the caller is not the blog's owner.
    """
    db_blog = await repo.get_or_raise(blog_id)

    if db_blog.user_id != current_user.id:
        raise AuthorizationError

    await repo.delete(db_blog)
    logger.info(f"Blog {db_blog.id} deleted by {current_user.username}")
    return Response(status_code=HTTP_204_NO_CONTENT)
