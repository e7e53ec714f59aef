"""
Onboarding routes: role selection, profile forms and the two landing screens
reached after a profile is created.

Why:
    These screens form one flow (session guard → role registrar → navigator →
    profile form controller). The route layer only parses forms, checks CSRF
    and translates use-case results into HTML or redirects; the decisions live
    in `onboarding.*`.

Permissions:
    Every route here requires a session. The auth middleware redirects
    anonymous visitors to `/auth`; handlers re-check the session context so a
    request can never reach a write without a user id.

Dependency injection:
    Repos default to in-memory implementations. `storage_wiring` swaps in the
    Supabase or Postgres adapters; tests call `set_repos` with fakes.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from components import RoleSelectPage, StudentProfileForm, TutorProfileForm
from components.base import Component
from identity_access.domain import is_allowed_role
from onboarding import notifications
from onboarding.drafts import draft_from_form, draft_values, empty_draft
from onboarding.navigation import Outcome, destination_for
from onboarding.notifications import Notification
from onboarding.ports import ProfileRepoProtocol, RoleAssignmentRepoProtocol
from onboarding.profiles import ProfileSubmissionService
from onboarding.registrar import FAILED, IGNORED, RoleRegistrar
from onboarding.repo_memory import InMemoryProfileRepo, InMemoryRoleAssignmentRepo

import state
from routes.security import is_same_origin

onboarding_router = APIRouter(tags=["Onboarding"])
logger = logging.getLogger("tutorconnect.web.onboarding")

PROFILE_FORMS = {
    "student": StudentProfileForm,
    "tutor": TutorProfileForm,
}

REGISTRAR = RoleRegistrar(InMemoryRoleAssignmentRepo())
PROFILES = ProfileSubmissionService(InMemoryProfileRepo())


def set_repos(role_repo: RoleAssignmentRepoProtocol, profile_repo: ProfileRepoProtocol) -> None:
    """Inject persistence adapters (wiring or tests).

    Creates fresh use-case instances so no in-flight state leaks across
    repos.
    """
    global REGISTRAR, PROFILES
    REGISTRAR = RoleRegistrar(role_repo)
    PROFILES = ProfileSubmissionService(profile_repo)


def _to_auth() -> RedirectResponse:
    return RedirectResponse(url=destination_for(Outcome.UNAUTHENTICATED), status_code=302)


def _csrf_error(request: Request) -> Response:
    logger.warning("CSRF check failed: path=%s", request.url.path)
    return Response("CSRF Error", status_code=403, headers={"Cache-Control": "private, no-store"})


def _role_page(
    request: Request,
    session_id: str,
    *,
    pending_role: Optional[str] = None,
    notification: Optional[Notification] = None,
    status_code: int = 200,
) -> HTMLResponse:
    csrf = state.get_or_create_csrf_token(session_id)
    content = RoleSelectPage(csrf, pending_role=pending_role).render()
    layout = state.page(request, title="Choose your role", content=content, notification=notification)
    return state.layout_response(request, layout, status_code=status_code)


@onboarding_router.get("/role-select", response_class=HTMLResponse)
async def role_select_page(request: Request):
    """Role selection screen (student or tutor).

    Cards render disabled in their loading state while this user's
    registration is still in flight.
    """
    ctx = state.current_session(request)
    if ctx is None:
        return _to_auth()
    return _role_page(request, ctx.session_id, pending_role=REGISTRAR.pending_role(ctx.user_id))


@onboarding_router.post("/role-select")
async def role_select_submit(request: Request):
    """Record the chosen role and continue to its profile form.

    Responses:
        - 303 → `/profile/{role}` when the role was stored or already held.
        - 409 with the loading state when a registration is already pending.
        - 200 with an error toast when the store failed (retry allowed).
        - 400 for an unknown role, 403 for a CSRF failure.
    """
    ctx = state.current_session(request)
    if ctx is None:
        return _to_auth()
    form = await request.form()
    if not is_same_origin(request) or not state.validate_csrf(ctx.session_id, form.get("csrf_token")):
        return _csrf_error(request)
    role = str(form.get("role") or "").strip().lower()
    if not is_allowed_role(role):
        return _role_page(
            request, ctx.session_id, notification=notifications.error("Please choose a valid role."), status_code=400
        )

    result = await REGISTRAR.select_role(ctx.user_id, role)
    if result.outcome == IGNORED:
        return _role_page(request, ctx.session_id, pending_role=role, status_code=409)
    if result.outcome == FAILED:
        return _role_page(request, ctx.session_id, notification=result.notification)
    return RedirectResponse(url=result.destination, status_code=303)


def _profile_page(
    request: Request,
    role: str,
    session_id: str,
    *,
    values: Optional[dict] = None,
    missing: tuple[str, ...] = (),
    notification: Optional[Notification] = None,
    status_code: int = 200,
) -> HTMLResponse:
    form_cls = PROFILE_FORMS[role]
    csrf = state.get_or_create_csrf_token(session_id)
    content = form_cls(csrf, values=values, missing=missing).render()
    layout = state.page(request, title=f"{role.title()} Profile", content=content, notification=notification)
    return state.layout_response(request, layout, status_code=status_code)


def _not_found() -> HTMLResponse:
    return HTMLResponse("Not Found", status_code=404)


@onboarding_router.get("/profile/{role}", response_class=HTMLResponse)
async def profile_page(request: Request, role: str):
    ctx = state.current_session(request)
    if ctx is None:
        return _to_auth()
    if role not in PROFILE_FORMS:
        return _not_found()
    return _profile_page(request, role, ctx.session_id, values=draft_values(empty_draft(role)))


@onboarding_router.post("/profile/{role}")
async def profile_submit(request: Request, role: str):
    """Validate and store the profile, then continue to the role's next screen.

    Rejected submissions re-render the form with every entered value and the
    notification (missing fields are marked). On success the notification is
    queued as a flash and the browser is redirected (PRG).
    """
    ctx = state.current_session(request)
    if ctx is None:
        return _to_auth()
    if role not in PROFILE_FORMS:
        return _not_found()
    form = await request.form()
    if not is_same_origin(request) or not state.validate_csrf(ctx.session_id, form.get("csrf_token")):
        return _csrf_error(request)

    subjects = [str(s) for s in form.getlist("subjects")]
    draft = draft_from_form(role, form, subjects=subjects)
    result = await PROFILES.submit(ctx.user_id, draft)
    if not result.accepted:
        return _profile_page(
            request,
            role,
            ctx.session_id,
            values=draft_values(result.draft),
            missing=result.missing,
            notification=result.notification,
        )
    state.push_flash(ctx.session_id, result.notification)
    return RedirectResponse(url=result.destination, status_code=303)


def _terminal_page(request: Request, *, title: str, heading: str, text: str) -> HTMLResponse:
    ctx = state.current_session(request)
    notification = state.pop_flash(ctx.session_id if ctx else None)
    content = f"""
    <section class="container placeholder-screen" aria-labelledby="screen-heading">
        <h1 id="screen-heading">{Component.escape(heading)}</h1>
        <p class="text-muted">{Component.escape(text)}</p>
        <a class="btn btn-ghost" href="/">&larr; Back to Home</a>
    </section>
    """
    layout = state.page(request, title=title, content=content, notification=notification)
    return state.layout_response(request, layout)


@onboarding_router.get("/search", response_class=HTMLResponse)
async def search_page(request: Request):
    """Student landing screen after onboarding (tutor search follows later)."""
    if state.current_session(request) is None:
        return _to_auth()
    return _terminal_page(
        request,
        title="Find Tutors",
        heading="Find Tutors",
        text="Tutor search is coming soon. Your profile is ready.",
    )


@onboarding_router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(request: Request):
    """Tutor landing screen after onboarding."""
    if state.current_session(request) is None:
        return _to_auth()
    return _terminal_page(
        request,
        title="Tutor Dashboard",
        heading="Tutor Dashboard",
        text="Your dashboard is coming soon. Students near you will find your profile.",
    )


__all__ = ["onboarding_router", "set_repos"]
