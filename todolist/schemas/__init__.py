from todolist.schemas.auth import (
    AccountAuthorized,
    AuthorizationToken,
    GuestAuthorized,
    JoinRequest,
    LoginRequest,
    PrincipalPayload,
    RefreshRequest,
)
from todolist.schemas.pagination import Page, Pagination, PageRequest
from todolist.schemas.todo import TodoCreate, TodoUpdate, TodoResponse, TodoSummary, TodoSearch
from todolist.schemas.user import UserResponse, UserUpdate, UserSearch
from todolist.schemas.guest import GuestResponse, GuestUpdate, GuestSearch
