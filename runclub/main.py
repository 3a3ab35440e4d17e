import logging
from dataclasses import asdict
from typing import Any

from bs4 import BeautifulSoup
from fastapi import Body, Depends, FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from runclub.aggregation import leaderboard_figures, summarize
from runclub.config import DATA_DIR, NO_PLEDGE
from runclub.identity import UserIdentity, name_from_email
from runclub.ledger import InvalidRunError, Run, RunLedger
from runclub.pages import dashboard_page, leaderboard_page, login_page, signup_page, tracker_page
from runclub.store import FileStore, Store
from runclub.views import (
    append_row,
    parse_page,
    render_dashboard,
    render_history_table,
    render_leaderboard_row,
    render_tracker_feedback,
    render_welcome,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Run Club")

PLEDGE_REQUIRED = "You must agree to the Community Pledge to join.\nWe believe in sharing the wealth!"


def get_store() -> Store:
    return FileStore(DATA_DIR)


def get_ledger(store: Store = Depends(get_store)) -> RunLedger:
    return RunLedger(store)


def get_identity(store: Store = Depends(get_store)) -> UserIdentity:
    return UserIdentity(store)


def page_doc(html: str, identity: UserIdentity) -> BeautifulSoup:
    doc = parse_page(html)
    render_welcome(doc, identity.current())
    return doc


def record_run(ledger: RunLedger, distance: Any, pledge: Any) -> Run:
    try:
        return ledger.append(distance, pledge)
    except InvalidRunError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err


@app.get("/")
def home(identity: UserIdentity = Depends(get_identity)) -> RedirectResponse:
    target = "/dashboard" if identity.current() else "/login"
    return RedirectResponse(url=target)


@app.get("/login", response_class=HTMLResponse)
def login_form(identity: UserIdentity = Depends(get_identity)) -> str:
    return str(page_doc(login_page(), identity))


@app.post("/login")
def login(email: str = Form(""), identity: UserIdentity = Depends(get_identity)) -> RedirectResponse:
    identity.set(name_from_email(email))
    return RedirectResponse(url="/dashboard", status_code=303)


@app.get("/signup", response_class=HTMLResponse)
def signup_form(identity: UserIdentity = Depends(get_identity)) -> str:
    return str(page_doc(signup_page(), identity))


@app.post("/signup", response_model=None)
def signup(
    fullname: str = Form(""),
    pledge: str | None = Form(None),
    identity: UserIdentity = Depends(get_identity),
) -> HTMLResponse | RedirectResponse:
    if not pledge:
        doc = page_doc(signup_page(PLEDGE_REQUIRED), identity)
        return HTMLResponse(str(doc), status_code=400)
    name = fullname.strip()
    if not name:
        raise HTTPException(status_code=400, detail="fullname is required.")
    identity.set(name)
    return RedirectResponse(url="/dashboard", status_code=303)


@app.get("/logout")
def logout(identity: UserIdentity = Depends(get_identity)) -> RedirectResponse:
    # run history stays with the profile
    identity.clear()
    return RedirectResponse(url="/login")


@app.get("/tracker", response_class=HTMLResponse)
def tracker(
    ledger: RunLedger = Depends(get_ledger),
    identity: UserIdentity = Depends(get_identity),
) -> str:
    doc = page_doc(tracker_page(), identity)
    render_history_table(doc, ledger.load())
    return str(doc)


@app.post("/tracker", response_class=HTMLResponse)
def log_run(
    distance: str = Form(""),
    pledge: str = Form(NO_PLEDGE),
    ledger: RunLedger = Depends(get_ledger),
    identity: UserIdentity = Depends(get_identity),
) -> str:
    previous = ledger.load()
    run = record_run(ledger, distance, pledge)
    doc = page_doc(tracker_page(), identity)
    render_history_table(doc, previous)
    render_tracker_feedback(doc, run.distance, run.pledge)
    append_row(doc, run.distance, run.pledge, run.date)
    return str(doc)


@app.get("/dashboard", response_class=HTMLResponse)
def dashboard(
    ledger: RunLedger = Depends(get_ledger),
    identity: UserIdentity = Depends(get_identity),
) -> str:
    runs = ledger.load()
    doc = page_doc(dashboard_page(), identity)
    render_dashboard(doc, summarize(runs), runs)
    return str(doc)


@app.get("/leaderboard", response_class=HTMLResponse)
def leaderboard(
    ledger: RunLedger = Depends(get_ledger),
    identity: UserIdentity = Depends(get_identity),
) -> str:
    runs = ledger.load()
    doc = page_doc(leaderboard_page(), identity)
    render_leaderboard_row(doc, identity.current(), leaderboard_figures(runs) if runs else None)
    return str(doc)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/api/runs")
def list_runs(ledger: RunLedger = Depends(get_ledger)) -> list[dict[str, Any]]:
    return [run.to_dict() for run in ledger.load()]


@app.post("/api/runs")
def create_run(payload: dict[str, Any] = Body(...), ledger: RunLedger = Depends(get_ledger)) -> dict[str, Any]:
    run = record_run(ledger, payload.get("distance"), payload.get("pledge", NO_PLEDGE))
    return run.to_dict()


@app.get("/api/summary")
def get_summary(ledger: RunLedger = Depends(get_ledger)) -> dict[str, Any]:
    return asdict(summarize(ledger.load()))
