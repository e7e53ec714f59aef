"""
Component rendering: escaping, loading states, prefilled forms.
"""

from components import (
    AuthForm,
    Layout,
    RoleCard,
    RoleSelectPage,
    StudentProfileForm,
    Toast,
    TutorProfileForm,
)
from components.base import Component
from onboarding import notifications
from onboarding.catalog import GRADES, SUBJECTS


def test_attributes_and_classes():
    assert Component.attributes(id="age", data_role="student", disabled=True, hidden=False) == (
        'id="age" data-role="student" disabled'
    )
    assert Component.classes("btn", "", active=True, muted=False) == "btn active"


def test_toast_kinds_and_escaping():
    destructive = Toast(notifications.error("<b>boom</b>")).render()
    assert 'role="alert"' in destructive
    assert "toast--destructive" in destructive
    assert "&lt;b&gt;boom&lt;/b&gt;" in destructive

    info = Toast(notifications.profile_created("student")).render()
    assert 'role="status"' in info
    assert "Profile Created!" in info
    assert Toast(None).render() == ""


def test_role_card_default_and_loading_state():
    card = RoleCard(
        "tutor",
        title="I'm a Tutor",
        description="d",
        highlights=("a",),
        button_label="Continue as Tutor",
        csrf_token="tok",
    ).render()
    assert 'name="role" value="tutor"' in card
    assert ">Continue as Tutor</button>" in card
    assert "disabled" not in card

    busy = RoleCard(
        "tutor",
        title="I'm a Tutor",
        description="d",
        highlights=(),
        button_label="Continue as Tutor",
        csrf_token="tok",
        disabled=True,
        is_loading=True,
    ).render()
    assert ">Loading…</button>" in busy
    assert 'aria-busy="true"' in busy
    assert "role-card--busy" in busy


def test_role_select_page_pending_disables_both_cards():
    html = RoleSelectPage("tok", pending_role="student").render()
    assert html.count(" disabled") == 2
    assert html.count(">Loading…</button>") == 1
    assert "Continue as Tutor" in html
    assert 'href="/"' in html


def test_student_form_lists_grades_and_subjects_in_order():
    html = StudentProfileForm("tok").render()
    positions = [html.index(f">{g}</option>") for g in GRADES]
    assert positions == sorted(positions)
    subject_positions = [html.index(f'value="{s}"') for s in SUBJECTS]
    assert subject_positions == sorted(subject_positions)
    assert 'action="/profile/student"' in html
    assert 'href="/role-select"' in html


def test_profile_form_keeps_values_and_marks_missing():
    values = {"name": '<Ana "A">', "subjects": ("Physics",), "hourly_rate": ""}
    html = TutorProfileForm("tok", values=values, missing=("hourly_rate", "email")).render()

    assert 'value="&lt;Ana &quot;A&quot;&gt;"' in html
    assert 'value="Physics" checked' in html
    assert html.count(">Required</p>") == 2
    assert 'aria-invalid="true"' in html


def test_auth_form_has_both_modes_and_token():
    html = AuthForm("state-token", email="ana@example.com", error="Invalid login credentials").render()
    assert 'name="csrf_token" value="state-token"' in html
    assert 'value="sign_in"' in html
    assert 'value="sign_up"' in html
    assert 'value="ana@example.com"' in html
    assert "Invalid login credentials" in html


def test_layout_escapes_title_and_shows_account():
    html = Layout(
        title="<script>",
        content="<p>ok</p>",
        user={"user_id": "u-1", "email": "ana@example.com"},
        csrf_token="tok",
    ).render()
    assert "<title>&lt;script&gt; - TutorConnect</title>" in html
    assert "ana@example.com" in html
    assert 'action="/auth/logout"' in html
    assert '<main id="main-content"' in html


def test_layout_anonymous_navigation():
    html = Layout(title="Home", content="").render()
    assert 'href="/auth"' in html
    assert "/auth/logout" not in html
