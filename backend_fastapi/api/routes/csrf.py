from fastapi import APIRouter, Depends, Request, Response

from backend_fastapi.api.schemas import CsrfTokenResponse
from backend_fastapi.api.security import (
    CSRF_COOKIE_NAME,
    CSRF_HEADER_NAME,
    new_csrf_token,
    require_user,
)

router = APIRouter(prefix="/api", tags=["security"], dependencies=[Depends(require_user)])


@router.get(
    "/csrf",
    response_model=CsrfTokenResponse,
    summary="Get an anti-forgery token",
)
def get_csrf_token(request: Request, response: Response) -> CsrfTokenResponse:
    """
    Returns the token to send in the `X-XSRF-TOKEN` header of POST, PUT and
    DELETE requests. The same value is set as the `XSRF-TOKEN` cookie.
    """
    token = request.cookies.get(CSRF_COOKIE_NAME) or new_csrf_token()
    response.set_cookie(CSRF_COOKIE_NAME, token, path="/", samesite="lax")
    return CsrfTokenResponse(headerName=CSRF_HEADER_NAME, token=token)
