"""
Submit button component.

Keeps loading labels and the disabled state consistent. The client script
switches a button to its `data-loading-label` when the form submits; the
server renders the same state when it knows a request is still pending.
"""

from typing import Optional

from ..base import Component


class SubmitButton(Component):
    """Primary form action button."""

    def __init__(
        self,
        label: str,
        *,
        loading_label: str = "Loading…",
        is_loading: bool = False,
        disabled: bool = False,
        name: Optional[str] = None,
        value: Optional[str] = None,
        data_action: Optional[str] = None,
    ) -> None:
        self.label = label
        self.loading_label = loading_label
        self.is_loading = is_loading
        self.disabled = disabled
        self.name = name
        self.value = value
        self.data_action = data_action

    def render(self) -> str:
        label = self.loading_label if self.is_loading else self.label
        attrs = self.attributes(
            type="submit",
            class_="btn btn-primary",
            name=self.name,
            value=self.value,
            disabled=self.disabled or self.is_loading,
            data_action=self.data_action,
            data_loading_label=self.loading_label,
            aria_busy="true" if self.is_loading else None,
        )
        return f"<button {attrs}>{self.escape(label)}</button>"
