"""
Shared rendering for the student and tutor profile forms.

Subclasses declare their sections as tuples of `FieldSpec`; this base class
turns them into field components, prefilled from the submitted values so a
rejected submission loses nothing.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from onboarding.catalog import SUBJECTS

from ..base import Component
from .fields import CheckboxGroupField, SelectField, TextAreaField, TextInputField
from .submit import SubmitButton


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = "text"  # text | email | tel | number | textarea | select | subjects
    placeholder: Optional[str] = None
    required: bool = False
    options: Sequence[str] = ()


class ProfileForm(Component):
    role = ""
    heading = ""
    intro = ""
    sections: Sequence[tuple[str, Sequence[FieldSpec]]] = ()

    def __init__(
        self,
        csrf_token: str,
        values: Optional[Mapping[str, object]] = None,
        missing: Sequence[str] = (),
    ) -> None:
        self.csrf_token = csrf_token
        self.values = values or {}
        self.missing = set(missing)

    def render(self) -> str:
        sections_html = "".join(self._render_section(title, specs) for title, specs in self.sections)
        action = f"/profile/{self.role}"
        return f"""
        <section class="card profile-form-card" aria-labelledby="profile-heading">
            <a class="btn btn-ghost back-link" href="/role-select">&larr; Back</a>
            <h1 id="profile-heading">{self.escape(self.heading)}</h1>
            <p class="text-muted">{self.escape(self.intro)}</p>
            <form method="post" action="{action}" class="profile-form" data-role="{self.escape(self.role)}">
                <input type="hidden" name="csrf_token" value="{self.escape(self.csrf_token)}">
                {sections_html}
                <div class="form-actions">
                    {SubmitButton("Create Profile", loading_label="Creating...").render()}
                </div>
            </form>
        </section>
        """

    def _render_section(self, title: str, specs: Sequence[FieldSpec]) -> str:
        fields_html = "".join(self._render_field(spec) for spec in specs)
        return f'<div class="form-section"><h2>{self.escape(title)}</h2>{fields_html}</div>'

    def _render_field(self, spec: FieldSpec) -> str:
        error = "Required" if spec.name in self.missing else None
        if spec.kind == "subjects":
            checked = self.values.get(spec.name) or ()
            return CheckboxGroupField(spec.name, spec.label, required=spec.required, error_text=error).render(
                SUBJECTS, checked=checked  # type: ignore[arg-type]
            )
        value = str(self.values.get(spec.name) or "")
        if spec.kind == "select":
            return SelectField(spec.name, spec.label, required=spec.required, error_text=error).render(
                spec.options, value=value, placeholder=spec.placeholder or "Select"
            )
        if spec.kind == "textarea":
            return TextAreaField(spec.name, spec.label, required=spec.required, error_text=error).render(
                value, placeholder=spec.placeholder
            )
        return TextInputField(spec.name, spec.label, required=spec.required, error_text=error).render(
            value=value,
            input_type=spec.kind,
            placeholder=spec.placeholder,
            required=spec.required,
        )
