"""Server-rendered club dashboard.

Cookies stand in for the browser's persistent storage: every request
seeds a ``MemoryTokenStorage`` from them, talks to this application's own
``/api`` routes through an in-process client, and writes back whatever
the session changed (rotated tokens, logout, locale).
"""
import asyncio
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import Any, Dict, List, Optional

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from app.client.resources import ClubStore, ResourceStore, RoleStore
from app.client.session import AuthSession
from app.client.storage import AUTH_KEYS, LOCALE_KEY, MemoryTokenStorage
from app.core.config import FRONTEND_ROUTES, settings
from app.core.errors import ApiError, AuthError
from app.i18n import SUPPORTED_LOCALES, is_supported_locale, translate
from app.schemas.registry import FormField, ResourceSpec, get_resource
from app.utils import format_date

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["format_date"] = format_date

SECTIONS = ("members", "users", "sponsors", "payments", "roles", "permissions", "properties", "activities")
HOME_STATS = (
    ("members", "totalMembers"),
    ("users", "totalUsers"),
    ("sponsors", "totalSponsors"),
    ("payments", "totalPayments"),
)
DATE_COLUMNS = {"createdAt", "updatedAt", "date", "foundationDate"}
SEARCH_COLUMNS = ("name", "email")
CLUB_FIELDS = (FormField("name", required=True), FormField("location"), FormField("description", "textarea"))
COOKIE_MAX_AGE = 60 * 60 * 24 * 30

router = APIRouter(tags=["dashboard"], include_in_schema=False)


class Dashboard:
    """Per-request session state of one browser."""

    def __init__(self, request: Request):
        self.request = request
        locale = request.cookies.get(LOCALE_KEY)
        self.locale = locale if is_supported_locale(locale) else settings.DEFAULT_LOCALE
        self.storage = MemoryTokenStorage({key: request.cookies.get(key) for key in AUTH_KEYS})
        self._initial = self.storage.snapshot()
        self.http = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url=settings.FRONTEND_URL,
            timeout=settings.BACKEND_TIMEOUT_SECONDS,
        )
        self.session = AuthSession(self.http, self.storage)
        self.session.initialize()

    @property
    def user(self) -> Optional[dict]:
        return self.session.user

    def t(self, key: str) -> str:
        return translate(key, self.locale)

    def persist(self, response: Response) -> Response:
        """Mirror storage changes made during the request into cookies."""
        current = self.storage.snapshot()
        for key in AUTH_KEYS:
            value = current.get(key)
            if value == self._initial.get(key):
                continue
            if value is None:
                response.delete_cookie(key)
            else:
                response.set_cookie(
                    key,
                    value,
                    max_age=COOKIE_MAX_AGE,
                    httponly=True,
                    secure=settings.COOKIE_SECURE,
                    samesite="lax",
                )
        return response

    def redirect(self, url: str) -> Response:
        return self.persist(RedirectResponse(url, status_code=303))

    def render(self, template: str, context: Optional[Dict[str, Any]] = None, status_code: int = 200) -> Response:
        values = {
            "user": self.user,
            "locale": self.locale,
            "locales": SUPPORTED_LOCALES,
            "t": self.t,
            "sections": SECTIONS,
            "routes": FRONTEND_ROUTES,
        }
        values.update(context or {})
        response = templates.TemplateResponse(self.request, template, values, status_code=status_code)
        return self.persist(response)

    def session_expired(self) -> Response:
        logger.info("Dashboard session expired, sending user to login")
        self.storage.clear_auth_state()
        return self.redirect(FRONTEND_ROUTES["LOGIN"])


async def get_dashboard(request: Request):
    dashboard = Dashboard(request)
    try:
        yield dashboard
    finally:
        await dashboard.http.aclose()


def _section_spec(section: str) -> ResourceSpec:
    if section not in SECTIONS:
        raise HTTPException(status_code=404, detail="Not Found")
    return get_resource(section)


def _store(dashboard: Dashboard, spec: ResourceSpec) -> ResourceStore:
    if spec.name == "roles":
        return RoleStore(dashboard.session)
    return ResourceStore(dashboard.session, spec)


def _cell(spec: ResourceSpec, column: str, value: Any, dashboard: Dashboard) -> str:
    if value is None:
        return ""
    if column in DATE_COLUMNS:
        return format_date(value)
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if spec.name == "payments" and column == "type":
        return dashboard.t(f"payments.types.{value}")
    return str(value)


def _form_payload(fields, form) -> Dict[str, Any]:
    """Turn submitted form fields into a payload, dropping blanks."""
    payload: Dict[str, Any] = {}
    for field in fields:
        raw = (form.get(field.name) or "").strip()
        if not raw:
            continue
        if field.kind == "list":
            payload[field.name] = [item.strip() for item in raw.split(",") if item.strip()]
        else:
            payload[field.name] = raw
    return payload


def _form_values(fields, form) -> Dict[str, str]:
    return {field.name: str(form.get(field.name) or "") for field in fields}


def _record_values(fields, item: dict) -> Dict[str, str]:
    """Prefill values of an edit form from a stored record."""
    values = {}
    for field in fields:
        value = item.get(to_camel(field.name), item.get(field.name))
        if value is None or field.kind == "password":
            values[field.name] = ""
        elif isinstance(value, list):
            values[field.name] = ", ".join(str(v) for v in value)
        elif field.kind == "datetime-local":
            values[field.name] = str(value)[:16]
        else:
            values[field.name] = str(value)
    return values


def _validation_messages(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{location}: {item.get('msg')}" if location else str(item.get("msg")))
    return messages


def _matches(item: dict, query: str) -> bool:
    needle = query.casefold()
    return any(needle in str(item.get(column) or "").casefold() for column in SEARCH_COLUMNS)


def _same_origin(url: str, request: Request) -> bool:
    parsed = urlparse(url)
    return (not parsed.scheme and not parsed.netloc) or parsed.netloc == request.url.netloc


async def _load_section(store: ResourceStore) -> List[dict]:
    if isinstance(store, RoleStore):
        return await store.fetch_my_club()
    return await store.fetch_all()


async def _render_section(
    dashboard: Dashboard,
    spec: ResourceSpec,
    form_values: Optional[Dict[str, str]] = None,
    form_errors: Optional[List[str]] = None,
    status_code: int = 200,
    query: str = "",
    edit_id: Optional[str] = None,
) -> Response:
    store = _store(dashboard, spec)
    try:
        await _load_section(store)
    except ApiError as e:
        if e.status_code == 401:
            return dashboard.session_expired()

    query = query.strip()
    items = [item for item in store.items if _matches(item, query)] if query else store.items
    rows = []
    for item in items:
        record_id = item.get("id")
        if edit_id is not None and record_id == edit_id:
            values = form_values or {}
        else:
            values = _record_values(spec.form_fields, item)
        rows.append(
            {
                "id": record_id,
                "cells": [_cell(spec, column, item.get(column), dashboard) for column in spec.columns],
                "values": values,
                "editing": record_id == edit_id,
            }
        )

    return dashboard.render(
        "section.html",
        {
            "spec": spec,
            "section": spec.name,
            "rows": rows,
            "query": query,
            "error": store.error,
            "form_values": (form_values or {}) if edit_id is None else {},
            "form_errors": form_errors or [],
        },
        status_code=status_code,
    )


@router.get("/")
async def index():
    return RedirectResponse(FRONTEND_ROUTES["HOME"], status_code=303)


@router.get("/login")
async def login_page(dashboard: Dashboard = Depends(get_dashboard)):
    if dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["HOME"])
    return dashboard.render("login.html", {"error": None, "email": ""})


@router.post("/login")
async def login_submit(
    email: str = Form(default=""),
    password: str = Form(default=""),
    dashboard: Dashboard = Depends(get_dashboard),
):
    try:
        await dashboard.session.login(email, password)
    except AuthError as e:
        return dashboard.render("login.html", {"error": e.message, "email": email}, status_code=400)
    return dashboard.redirect(FRONTEND_ROUTES["HOME"])


@router.get("/register")
async def register_page(dashboard: Dashboard = Depends(get_dashboard)):
    if dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["HOME"])
    return dashboard.render("register.html", {"error": None, "values": {}})


@router.post("/register")
async def register_submit(
    name: str = Form(default=""),
    email: str = Form(default=""),
    password: str = Form(default=""),
    club_name: str = Form(default=""),
    dashboard: Dashboard = Depends(get_dashboard),
):
    try:
        await dashboard.session.register(name, email, password, club_name or None)
    except AuthError as e:
        values = {"name": name, "email": email, "club_name": club_name}
        return dashboard.render("register.html", {"error": e.message, "values": values}, status_code=400)
    return dashboard.redirect(FRONTEND_ROUTES["HOME"])


@router.post("/logout")
async def logout(dashboard: Dashboard = Depends(get_dashboard)):
    await dashboard.session.logout()
    return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])


@router.post("/locale")
async def set_locale(
    request: Request,
    locale: str = Form(default=""),
    dashboard: Dashboard = Depends(get_dashboard),
):
    referer = request.headers.get("referer")
    # Only bounce back to pages of this site
    target = referer if referer and _same_origin(referer, request) else FRONTEND_ROUTES["HOME"]
    response = dashboard.redirect(target)
    if is_supported_locale(locale):
        response.set_cookie(LOCALE_KEY, locale, max_age=COOKIE_MAX_AGE, samesite="lax")
    return response


async def _render_home(
    dashboard: Dashboard,
    club_values: Optional[Dict[str, str]] = None,
    club_errors: Optional[List[str]] = None,
    status_code: int = 200,
) -> Response:
    stores = [ResourceStore(dashboard.session, name) for name, _ in HOME_STATS]
    club_store = ClubStore(dashboard.session)
    results = await asyncio.gather(
        *(store.fetch_all() for store in stores),
        club_store.fetch(),
        return_exceptions=True,
    )

    for result in results:
        if isinstance(result, ApiError) and result.status_code == 401:
            return dashboard.session_expired()
        if isinstance(result, Exception) and not isinstance(result, ApiError):
            raise result

    stats = [
        {"key": key, "section": name, "count": len(store.items), "error": store.error}
        for (name, key), store in zip(HOME_STATS, stores)
    ]
    if club_values is None and club_store.club:
        club_values = _record_values(CLUB_FIELDS, club_store.club)
    return dashboard.render(
        "home.html",
        {
            "stats": stats,
            "club": club_store.club,
            "club_fields": CLUB_FIELDS,
            "club_values": club_values or {},
            "club_errors": club_errors or [],
        },
        status_code=status_code,
    )


@router.get("/home")
async def home(dashboard: Dashboard = Depends(get_dashboard)):
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])
    return await _render_home(dashboard)


@router.post("/home/club")
async def home_club_update(request: Request, dashboard: Dashboard = Depends(get_dashboard)):
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])

    form = await request.form()
    values = _form_values(CLUB_FIELDS, form)

    try:
        await ClubStore(dashboard.session).update(_form_payload(CLUB_FIELDS, form))
    except ValidationError as e:
        return await _render_home(dashboard, values, _validation_messages(e), status_code=400)
    except ApiError as e:
        if e.status_code == 401:
            return dashboard.session_expired()
        return await _render_home(dashboard, values, [e.message], status_code=400)

    return dashboard.redirect(FRONTEND_ROUTES["HOME"])


@router.get("/{section}")
async def section_page(section: str, q: str = "", dashboard: Dashboard = Depends(get_dashboard)):
    spec = _section_spec(section)
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])
    return await _render_section(dashboard, spec, query=q)


@router.post("/{section}")
async def section_create(section: str, request: Request, dashboard: Dashboard = Depends(get_dashboard)):
    spec = _section_spec(section)
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])

    form = await request.form()
    values = _form_values(spec.form_fields, form)
    store = _store(dashboard, spec)

    try:
        await store.create(_form_payload(spec.form_fields, form))
    except ValidationError as e:
        return await _render_section(dashboard, spec, values, _validation_messages(e), status_code=400)
    except ApiError as e:
        if e.status_code == 401:
            return dashboard.session_expired()
        return await _render_section(dashboard, spec, values, [e.message], status_code=400)

    return dashboard.redirect(f"/{spec.name}")


@router.post("/{section}/{record_id}")
async def section_update(
    section: str,
    record_id: str,
    request: Request,
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Apply an edit form; blank fields keep their stored value."""
    spec = _section_spec(section)
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])

    form = await request.form()
    values = _form_values(spec.form_fields, form)
    store = _store(dashboard, spec)

    try:
        await store.update(record_id, _form_payload(spec.form_fields, form))
    except ValidationError as e:
        return await _render_section(
            dashboard, spec, values, _validation_messages(e), status_code=400, edit_id=record_id
        )
    except ApiError as e:
        if e.status_code == 401:
            return dashboard.session_expired()
        return await _render_section(dashboard, spec, values, [e.message], status_code=400, edit_id=record_id)

    return dashboard.redirect(f"/{spec.name}")


@router.post("/{section}/{record_id}/delete")
async def section_delete(section: str, record_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    spec = _section_spec(section)
    if not dashboard.user:
        return dashboard.redirect(FRONTEND_ROUTES["LOGIN"])

    try:
        await _store(dashboard, spec).delete(record_id)
    except ApiError as e:
        if e.status_code == 401:
            return dashboard.session_expired()
        return await _render_section(dashboard, spec, form_errors=[e.message], status_code=400)

    return dashboard.redirect(f"/{spec.name}")
