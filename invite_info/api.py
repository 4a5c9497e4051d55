from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from . import __version__
from .address import PageAddress
from .config import Settings
from .lookup import InviteClient
from .view import InviteLookupView


def create_app(settings: Settings, invite_client: Optional[InviteClient] = None) -> FastAPI:
    client = invite_client or InviteClient(settings)

    limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.close()

    app = FastAPI(
        title="Discord Invite Info",
        version=__version__,
        description="Inspect Discord invite metadata without joining the server",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.state.invite_client = client
    def _new_view(request: Request) -> InviteLookupView:
        address = PageAddress(path=request.url.path, query=request.url.query)
        return InviteLookupView(client, address=address)

    async def rate_limited(request: Request, exc: RateLimitExceeded) -> HTMLResponse:
        """Serve the page with an error banner instead of a bare 429 body."""
        view = _new_view(request)
        view.show_error(f"Too many requests ({exc.detail}), try again later")
        return HTMLResponse(content=view.render(), status_code=429)

    app.add_exception_handler(RateLimitExceeded, rate_limited)

    @app.get("/", response_class=HTMLResponse)
    @limiter.limit(settings.rate_limit)
    async def invite_page(request: Request):
        """Serve the lookup page, running the lookup named in ?invite= if present."""
        view = _new_view(request)
        await view.bootstrap(request.query_params)
        return HTMLResponse(content=view.render())

    @app.post("/", response_class=HTMLResponse)
    @limiter.limit(settings.rate_limit)
    async def submit_invite(request: Request, invite: str = Form("")):
        """Look up the submitted invite code and serve the page."""
        view = _new_view(request)
        await view.submit(invite)
        return HTMLResponse(content=view.render())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
