"""
Selector table for the challenge pages.

One read-only mapping from a logical element name to how it is found:
a CSS string, a callable building one, or a role+name pair for
``page.get_by_role``. Shared by every scenario; nothing mutates it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from playwright.sync_api import Locator, Page


class RoleSelector(NamedTuple):
    """Accessible role plus accessible name."""

    role: str
    name: str

    def locate(self, page: Page) -> Locator:
        return page.get_by_role(self.role, name=self.name)


SELECTORS = MappingProxyType({
    "link": lambda name: f"a[href='/{name}.html']",

    "email": "#email",
    "password": "#password",
    "submit": "#submitButton",
    "success": "#successMessage",

    # challenge 2
    "dashboard": "#dashboard",
    "menu_button": "#menuButton",
    "logout_option": "#logoutOption",

    # challenge 3
    "forgot_button": RoleSelector("button", "Forgot Password?"),
    "reset_heading": RoleSelector("heading", "Reset Password"),
    "reset_button": RoleSelector("button", "Reset Password"),
    "success_message": ".success-message",

    # challenge 4
    "profile_button": "#profileButton",
    "user_profile": "#userProfile",
    "logout_text": "Logout",
})
