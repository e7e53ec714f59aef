"""
Student profile form.
"""

from onboarding.catalog import GRADES

from .profile_form import FieldSpec, ProfileForm


class StudentProfileForm(ProfileForm):
    role = "student"
    heading = "Create Your Student Profile"
    intro = "Tell us about yourself to find the perfect tutor"
    sections = (
        (
            "Basic Information",
            (
                FieldSpec("name", "Full Name", placeholder="Enter your name", required=True),
                FieldSpec("age", "Age", kind="number", placeholder="Enter your age", required=True),
                FieldSpec("grade", "Grade/Level", kind="select", placeholder="Select grade", required=True, options=GRADES),
            ),
        ),
        (
            "Subjects",
            (FieldSpec("subjects", "Subjects Needed", kind="subjects", required=True),),
        ),
        (
            "Preferences",
            (
                FieldSpec("availability", "Preferred Availability", placeholder="e.g., Weekday evenings, Saturday mornings"),
                FieldSpec("budget", "Budget Range (per hour)", placeholder="e.g., $30-50"),
                FieldSpec("location", "Location", placeholder="Enter your city or area"),
                FieldSpec(
                    "special_requirements",
                    "Special Requirements",
                    kind="textarea",
                    placeholder="Any specific learning needs or preferences...",
                ),
            ),
        ),
    )
