"""
Form components for TutorConnect.

Building blocks (fields, submit button) plus the three forms rendered by the
onboarding screens.
"""

from .fields import FormField, TextAreaField, TextInputField, SelectField, CheckboxGroupField
from .submit import SubmitButton
from .auth_form import AuthForm
from .profile_form import FieldSpec, ProfileForm
from .student_profile_form import StudentProfileForm
from .tutor_profile_form import TutorProfileForm

__all__ = [
    "FormField",
    "TextAreaField",
    "TextInputField",
    "SelectField",
    "CheckboxGroupField",
    "SubmitButton",
    "AuthForm",
    "FieldSpec",
    "ProfileForm",
    "StudentProfileForm",
    "TutorProfileForm",
]
