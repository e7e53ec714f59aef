"""
Tutor profile form.
"""

from .profile_form import FieldSpec, ProfileForm


class TutorProfileForm(ProfileForm):
    role = "tutor"
    heading = "Create Your Tutor Profile"
    intro = "Share your expertise and connect with students"
    sections = (
        (
            "Basic Information",
            (
                FieldSpec("name", "Full Name", placeholder="Enter your full name", required=True),
                FieldSpec("email", "Email", kind="email", placeholder="your@email.com", required=True),
                FieldSpec("phone", "Phone Number", kind="tel", placeholder="(123) 456-7890"),
            ),
        ),
        (
            "Subjects",
            (FieldSpec("subjects", "Subjects You Teach", kind="subjects", required=True),),
        ),
        (
            "Qualifications & Experience",
            (
                FieldSpec("education", "Education", placeholder="e.g., Bachelor's in Mathematics, University of..."),
                FieldSpec("experience", "Teaching Experience", placeholder="e.g., 5 years of tutoring high school students"),
                FieldSpec(
                    "bio",
                    "About You",
                    kind="textarea",
                    placeholder="Tell students about your teaching style and approach...",
                ),
            ),
        ),
        (
            "Availability & Rates",
            (
                FieldSpec("availability", "Availability", placeholder="e.g., Weekday evenings"),
                FieldSpec("hourly_rate", "Hourly Rate", placeholder="$40/hour", required=True),
            ),
        ),
        (
            "Location Preferences",
            (
                FieldSpec("location", "Your Location", placeholder="City or area"),
                FieldSpec("travel_radius", "Willing to Travel", placeholder="e.g., 10 km / Online only"),
            ),
        ),
    )
