"""
Base Component class for TutorConnect UI components.

Pages are assembled from small Python classes that return HTML strings. Every
piece of user-provided text goes through `escape`, and attributes are built
with `attributes`, so components never interpolate raw input.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for all UI components."""

    def render(self) -> str:
        """Return the component as an HTML string."""
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[str]) -> str:
        """Escape HTML entities; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a CSS class string.

        Example:
            >>> Component.classes("btn", "btn-primary", disabled=True, active=False)
            'btn btn-primary disabled'
        """
        names = [a for a in args if a]
        names.extend(key for key, value in conditionals.items() if value)
        return " ".join(names)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments.

        Trailing underscores are stripped (`class_` -> `class`, `for_` ->
        `for`), inner underscores become hyphens (`data_role` -> `data-role`).
        True renders a bare boolean attribute; False/None drop the attribute.

        Example:
            >>> Component.attributes(id="age", data_role="student", disabled=True)
            'id="age" data-role="student" disabled'
        """
        result = []
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)
