# TutorConnect component system
# Pure Python components for escaped HTML generation

from .base import Component
from .layout import Layout
from .toast import Toast
from .navigation import Navigation
from .cards import RoleCard
from .forms import (
    FormField,
    TextAreaField,
    TextInputField,
    SelectField,
    CheckboxGroupField,
    SubmitButton,
    AuthForm,
    StudentProfileForm,
    TutorProfileForm,
)
from .pages import LandingPage, RoleSelectPage

__all__ = [
    "Component",
    "Layout",
    "Toast",
    "Navigation",
    "RoleCard",
    "FormField",
    "TextAreaField",
    "TextInputField",
    "SelectField",
    "CheckboxGroupField",
    "SubmitButton",
    "AuthForm",
    "StudentProfileForm",
    "TutorProfileForm",
    "LandingPage",
    "RoleSelectPage",
]
