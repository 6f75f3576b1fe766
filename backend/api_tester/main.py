import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .builder import build_request
from .config import Settings, get_settings
from .curl import to_curl
from .errors import (
    FormBodyRequiredError,
    FormEntryNotFoundError,
    HistoryEntryNotFoundError,
    RequestBuildError,
    RequestInFlightError,
)
from .models import DraftView, EntryUpdate, ErrorPayload, HistoryEntry, RequestDraft
from .session import RequestSession, SendResult
from .transport import Transport

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_session(request: Request) -> RequestSession:
    return request.app.state.session


def create_app(
    settings: Optional[Settings] = None, transport: Optional[Transport] = None
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="API Tester Backend", version="0.4.0")
    app.state.session = RequestSession(settings=settings, transport=transport)
    logger.info("Local relay: %s", settings.relay or "disabled")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestInFlightError)
    async def _in_flight(request: Request, exc: RequestInFlightError):
        return JSONResponse(status_code=409, content={"error": exc.message})

    @app.exception_handler(HistoryEntryNotFoundError)
    async def _history_not_found(request: Request, exc: HistoryEntryNotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(FormEntryNotFoundError)
    async def _entry_not_found(request: Request, exc: FormEntryNotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(FormBodyRequiredError)
    async def _no_form_body(request: Request, exc: FormBodyRequiredError):
        return JSONResponse(status_code=409, content={"error": exc.message})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/draft", response_model=DraftView)
    def get_draft(session: RequestSession = Depends(get_session)):
        return session.view()

    @app.put("/draft", response_model=DraftView)
    def put_draft(draft: RequestDraft, session: RequestSession = Depends(get_session)):
        session.draft = draft
        return session.view()

    @app.post("/draft/body/entries", response_model=DraftView)
    def add_entry(
        payload: Optional[EntryUpdate] = None,
        session: RequestSession = Depends(get_session),
    ):
        payload = payload or EntryUpdate()
        session.add_entry(key=payload.key or "", value=payload.value or "")
        return session.view()

    @app.patch("/draft/body/entries/{entry_id}", response_model=DraftView)
    def update_entry(
        entry_id: str,
        payload: EntryUpdate,
        session: RequestSession = Depends(get_session),
    ):
        session.update_entry(entry_id, key=payload.key, value=payload.value)
        return session.view()

    @app.delete("/draft/body/entries/{entry_id}", response_model=DraftView)
    def remove_entry(entry_id: str, session: RequestSession = Depends(get_session)):
        session.remove_entry(entry_id)
        return session.view()

    @app.post("/send")
    async def send(
        draft: Optional[RequestDraft] = None,
        session: RequestSession = Depends(get_session),
    ) -> SendResult:
        if session.sending:
            raise RequestInFlightError()
        if draft is not None:
            session.draft = draft
        return await session.send()

    @app.get("/response")
    def last_response(session: RequestSession = Depends(get_session)) -> Optional[SendResult]:
        return session.response

    @app.get("/history", response_model=List[HistoryEntry])
    def get_history(session: RequestSession = Depends(get_session)):
        return session.history.entries()

    @app.delete("/history")
    def clear_history(session: RequestSession = Depends(get_session)):
        session.history.clear()
        return {"status": "ok"}

    @app.post("/history/{entry_id}/replay", response_model=DraftView)
    def replay(entry_id: str, session: RequestSession = Depends(get_session)):
        session.replay(entry_id)
        return session.view()

    @app.post("/curl")
    def generate_curl(
        draft: Optional[RequestDraft] = None,
        session: RequestSession = Depends(get_session),
    ):
        try:
            outbound = build_request(draft or session.draft, relay=settings.relay)
        except RequestBuildError as exc:
            return ErrorPayload(error=exc.message)
        return {"curl": to_curl(outbound)}

    return app


app = create_app()
