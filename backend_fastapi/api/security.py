import secrets

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from backend_fastapi.api.deps import credential_checker
from infrastructure.security.credentials import CredentialChecker

CSRF_COOKIE_NAME = "XSRF-TOKEN"
CSRF_HEADER_NAME = "X-XSRF-TOKEN"
SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})

_basic = HTTPBasic(auto_error=False)


def require_user(
    credentials: HTTPBasicCredentials | None = Depends(_basic),
    checker: CredentialChecker = Depends(credential_checker),
) -> str:
    if credentials is None or not checker.verify(
        credentials.username, credentials.password
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


def require_csrf_token(request: Request) -> None:
    """Double-submit check: the header must echo the XSRF-TOKEN cookie."""
    if request.method in SAFE_METHODS:
        return

    cookie = request.cookies.get(CSRF_COOKIE_NAME)
    header = request.headers.get(CSRF_HEADER_NAME)
    if not cookie or not header or not secrets.compare_digest(cookie, header):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or missing CSRF token",
        )


def new_csrf_token() -> str:
    return secrets.token_urlsafe(32)
