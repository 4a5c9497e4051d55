from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

INVITE_PARAM = "invite"


class PageAddress:
    """The page's own address as the browser shows it.

    Registered on the view as a post-success hook. After a successful lookup
    ``pushed`` holds the shareable ``?invite=`` address that the rendered page
    writes into history without navigating.
    """

    def __init__(self, path: str = "/", query: str = ""):
        self.path = path or "/"
        self.query = query
        self.pushed: Optional[str] = None

    @property
    def initial(self) -> str:
        return f"{self.path}?{self.query}" if self.query else self.path

    @property
    def current(self) -> str:
        return self.pushed or self.initial

    def invite_address(self, code: str) -> str:
        return f"{self.path}?{urlencode({INVITE_PARAM: code})}"

    def sync_invite(self, code: str) -> None:
        target = self.invite_address(code)
        if target == self.current:
            return
        logger.debug("Pushing page address %s", target)
        self.pushed = target
