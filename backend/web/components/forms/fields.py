"""
Form field components.

Each field renders label, control, optional help and error text inside the
same `form-field` wrapper, so both profile forms and the auth form share one
markup structure.
"""

from typing import Iterable, Optional, Sequence

from ..base import Component


class FormField(Component):
    """Wrapper that renders label, input slot, help, and error text."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    def render(self, input_html: str) -> str:
        state_class = " form-field--error" if self.error_text else ""
        required_marker = '<span class="form-required" aria-hidden="true"> *</span>' if self.required else ""
        help_html = (
            f'<p class="form-help" id="{self.field_id}-help">{self.escape(self.help_text)}</p>'
            if self.help_text
            else ""
        )
        error_html = (
            f'<p class="form-error" role="alert" id="{self.field_id}-error">{self.escape(self.error_text)}</p>'
            if self.error_text
            else ""
        )
        label_attrs = self.attributes(for_=self.field_id, class_="form-label")
        return (
            f'<div class="form-field{state_class}">'
            f"<label {label_attrs}>{self.escape(self.label)}{required_marker}</label>"
            f"{input_html}"
            f"{help_html}"
            f"{error_html}"
            "</div>"
        )

    def _control_attrs(self, **attrs: object) -> str:
        return self.attributes(
            id=self.field_id,
            name=self.field_id,
            aria_describedby=f"{self.field_id}-help" if self.help_text else None,
            aria_invalid="true" if self.error_text else "false",
            **attrs,
        )


class TextInputField(FormField):
    """Single-line input ('text', 'email', 'tel', 'number', 'password')."""

    def render(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        autocomplete: Optional[str] = None,
        placeholder: Optional[str] = None,
        **attrs: object,
    ) -> str:
        input_attrs = self._control_attrs(
            type=input_type,
            value=value,
            autocomplete=autocomplete,
            placeholder=placeholder,
            class_="form-input",
            **attrs,
        )
        return super().render(f"<input {input_attrs}>")


class TextAreaField(FormField):
    """Multi-line free text."""

    def render(self, value: str = "", rows: int = 4, placeholder: Optional[str] = None, **attrs: object) -> str:
        textarea_attrs = self._control_attrs(rows=str(rows), placeholder=placeholder, class_="form-input", **attrs)
        return super().render(f"<textarea {textarea_attrs}>{self.escape(value)}</textarea>")


class SelectField(FormField):
    """Drop-down with a leading empty placeholder option."""

    def render(self, options: Sequence[str], *, value: str = "", placeholder: str = "Select", **attrs: object) -> str:
        opts = [f'<option value="">{self.escape(placeholder)}</option>']
        for option in options:
            opt_attrs = self.attributes(value=option, selected=(option == value))
            opts.append(f"<option {opt_attrs}>{self.escape(option)}</option>")
        select_attrs = self._control_attrs(class_="form-input", **attrs)
        return super().render(f"<select {select_attrs}>{''.join(opts)}</select>")


class CheckboxGroupField(FormField):
    """Group of checkboxes sharing one name (multi-select).

    Rendered as a fieldset; the legend takes the place of the label.
    """

    def render(self, options: Sequence[str], *, checked: Iterable[str] = ()) -> str:  # type: ignore[override]
        selected = set(checked)
        boxes = []
        for index, option in enumerate(options):
            box_id = f"{self.field_id}-{index}"
            box_attrs = self.attributes(
                type="checkbox",
                id=box_id,
                name=self.field_id,
                value=option,
                checked=option in selected,
            )
            boxes.append(
                '<div class="checkbox-item">'
                f"<input {box_attrs}>"
                f'<label for="{box_id}">{self.escape(option)}</label>'
                "</div>"
            )
        required_marker = '<span class="form-required" aria-hidden="true"> *</span>' if self.required else ""
        error_html = (
            f'<p class="form-error" role="alert">{self.escape(self.error_text)}</p>' if self.error_text else ""
        )
        return (
            f'<fieldset class="form-field checkbox-group" id="{self.field_id}">'
            f'<legend class="form-label">{self.escape(self.label)}{required_marker}</legend>'
            f'<div class="checkbox-grid">{"".join(boxes)}</div>'
            f"{error_html}"
            "</fieldset>"
        )
