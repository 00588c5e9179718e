"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Provided here:
- DbSession: a per-request database session
- BookStoreDep: the Book store bound to that session
- require_identity / CurrentIdentity: the bearer-token gate
- BearerGateRoute: route class that runs the gate before the body is read
"""

from collections.abc import Callable, Coroutine
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import AuthError
from app.services.book_store import BookStore
from app.services.security import Identity, decode_identity

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


def get_book_store(db: DbSession) -> BookStore:
    """Provide a BookStore bound to the request's session."""
    return BookStore(db)


BookStoreDep = Annotated[BookStore, Depends(get_book_store)]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from the "Authorization: Bearer <token>"
# header and registers the security scheme in the OpenAPI document.
# auto_error=False lets us answer a missing header with our own 401.

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Bearer token issued by the authentication service",
)


def _unauthorized(error: AuthError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate_request(request: Request) -> Identity:
    """
    Verify the request's bearer credential and record the identity.

    Reads the Authorization header directly, so it can run before the
    request body is touched.

    Raises:
        HTTPException: 401 if the credential is missing or invalid
    """
    identity = getattr(request.state, "identity", None)
    if identity is not None:
        return identity

    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer":
        token = None

    try:
        identity = decode_identity(token or None)
    except AuthError as e:
        raise _unauthorized(e)

    request.state.identity = identity
    return identity


def require_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """
    Gate for protected routes.

    1. Extracts the bearer credential from the Authorization header
    2. Verifies it with decode_identity()
    3. Attaches the identity to request.state.identity

    Declaring it as a dependency also puts the bearer scheme in the
    OpenAPI document. On routers that use BearerGateRoute the check has
    already run and the recorded identity is returned.

    Raises:
        HTTPException: 401 if the credential is missing or invalid.
            The route handler is never called in that case.
    """
    return authenticate_request(request)


class BearerGateRoute(APIRoute):
    """
    Route that checks the bearer credential before anything else.

    FastAPI reads and validates the request body before it solves the
    route's dependencies, so a dependency alone would answer a malformed
    body with 422 even when no token was sent. This route runs
    authenticate_request() first; unauthenticated requests always get 401.

    Usage:
        router = APIRouter(route_class=BearerGateRoute)
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            authenticate_request(request)
            return await handler(request)

        return gated_handler


CurrentIdentity = Annotated[Identity, Depends(require_identity)]
