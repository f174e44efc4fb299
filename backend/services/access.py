"""
Request access state: locale and share-link restriction

Computed once per request from cookies by the middleware; handlers get the
result through a dependency instead of reading cookies themselves.
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from core.config import LOCALES, DEFAULT_LOCALE, LOCALE_COOKIE, SHARE_LINK_ACCESS_COOKIE


@dataclass(frozen=True)
class AccessState:
    locale: str
    gallery_link_restricted: bool


def resolve_locale(cookie_value: Optional[str]) -> str:
    """Cookie locale when supported, otherwise the default locale"""
    if cookie_value and cookie_value in LOCALES:
        return cookie_value
    return DEFAULT_LOCALE


def is_share_link_restricted(cookie_value: Optional[str]) -> bool:
    # Any value containing "true" marks a share-link visit
    return bool(cookie_value) and "true" in cookie_value


def compute_access_state(cookies: Mapping[str, str]) -> AccessState:
    return AccessState(
        locale=resolve_locale(cookies.get(LOCALE_COOKIE)),
        gallery_link_restricted=is_share_link_restricted(cookies.get(SHARE_LINK_ACCESS_COOKIE)),
    )


def needs_locale_cookie(path: str, cookie_value: Optional[str], locale: str) -> bool:
    """Admin API calls never get a locale cookie; everything else does when it changed"""
    if path.startswith("/api/admin"):
        return False
    return cookie_value != locale
