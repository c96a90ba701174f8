from bloglist.schemas.auth import LoginRequest, Token, TokenData
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate, BlogUserResponse
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserBlogResponse, UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogResponse",
    "BlogUpdate",
    "BlogUserResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "Token",
    "TokenData",
    "UserBlogResponse",
    "UserCreate",
    "UserResponse",
]
