"""
Request middleware: locale cookie and share-link access state
"""
from fastapi import Request

from .config import (
    DEFAULT_LOCALE, LOCALE_COOKIE, LOCALE_COOKIE_MAX_AGE
)
from services.access import AccessState, compute_access_state, needs_locale_cookie


async def locale_access_middleware(request: Request, call_next):
    """Attach AccessState to the request and keep the locale cookie in sync"""
    access = compute_access_state(request.cookies)
    request.state.access = access

    response = await call_next(request)

    if needs_locale_cookie(request.url.path, request.cookies.get(LOCALE_COOKIE), access.locale):
        response.set_cookie(
            LOCALE_COOKIE,
            access.locale,
            path="/",
            max_age=LOCALE_COOKIE_MAX_AGE,
            samesite="lax",
        )
    return response


def get_access_state(request: Request) -> AccessState:
    """Access state computed by the middleware for this request"""
    access = getattr(request.state, "access", None)
    if access is None:
        return AccessState(locale=DEFAULT_LOCALE, gallery_link_restricted=False)
    return access
