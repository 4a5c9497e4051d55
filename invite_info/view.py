from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional, TYPE_CHECKING

from .address import INVITE_PARAM, PageAddress
from .errors import FALLBACK_FAILURE_MESSAGE, InviteLookupError
from .page import render_page
from .phase import Error, Idle, Loading, Phase, Success
from .utils import normalize_invite_code

if TYPE_CHECKING:
    from .lookup import InviteClient

logger = logging.getLogger(__name__)

SuccessHook = Callable[[str], None]


class InviteLookupView:
    """State holder for one invite lookup page.

    Moves through Idle -> Loading -> Success/Error and back to Loading on a
    new submission. Post-success hooks run after a lookup succeeds; the page
    address is always registered as one.
    """

    def __init__(self, client: "InviteClient", address: Optional[PageAddress] = None):
        self.client = client
        self.address = address or PageAddress()
        self.input_code = ""
        self.phase: Phase = Idle()
        self._success_hooks: list[SuccessHook] = [self.address.sync_invite]

    def add_success_hook(self, hook: SuccessHook) -> None:
        self._success_hooks.append(hook)

    @property
    def loading(self) -> bool:
        return isinstance(self.phase, Loading)

    async def submit(self, raw_code: str) -> Phase:
        """Look up an invite and move to Success or Error.

        Empty input leaves the view untouched and sends nothing.
        """
        code = normalize_invite_code(raw_code or "")
        if not code:
            return self.phase

        self.input_code = code
        self.phase = Loading(code)
        try:
            lookup = await self.client.fetch_invite(code)
        except InviteLookupError as exc:
            self.phase = Error(exc.message)
            return self.phase
        except Exception:
            logger.exception("Unexpected error looking up invite %r", code)
            self.phase = Error(FALLBACK_FAILURE_MESSAGE)
            return self.phase

        self.phase = Success(
            code=code,
            record=lookup.record,
            payload=lookup.payload,
            fetched_at=datetime.now(),
        )
        for hook in self._success_hooks:
            hook(code)
        return self.phase

    def show_error(self, message: str) -> Phase:
        """Move to Error without a lookup, e.g. when the request was refused."""
        self.phase = Error(message)
        return self.phase

    async def bootstrap(self, query: Mapping[str, str]) -> Phase:
        """Run the lookup encoded in the page address, if there is one."""
        code = query.get(INVITE_PARAM)
        if not code:
            return self.phase
        self.input_code = code
        return await self.submit(code)

    def render(self) -> str:
        return render_page(
            self.phase,
            input_code=self.input_code,
            form_action=self.address.current,
            pushed_address=self.address.pushed,
        )
