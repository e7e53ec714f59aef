import pytest

from onboarding.navigation import Outcome, destination_for, profile_submitted_outcome


def test_fixed_destinations():
    assert destination_for(Outcome.UNAUTHENTICATED) == "/auth"
    assert destination_for(Outcome.STUDENT_PROFILE_SUBMITTED) == "/search"
    assert destination_for(Outcome.TUTOR_PROFILE_SUBMITTED) == "/dashboard"


@pytest.mark.parametrize("role", ["student", "tutor"])
def test_role_chosen_goes_to_profile_form(role):
    assert destination_for(Outcome.ROLE_CHOSEN, role=role) == f"/profile/{role}"


@pytest.mark.parametrize("role", [None, "", "admin", "Student"])
def test_role_chosen_requires_valid_role(role):
    with pytest.raises(ValueError):
        destination_for(Outcome.ROLE_CHOSEN, role=role)


def test_profile_submitted_outcome_by_role():
    assert profile_submitted_outcome("student") is Outcome.STUDENT_PROFILE_SUBMITTED
    assert profile_submitted_outcome("tutor") is Outcome.TUTOR_PROFILE_SUBMITTED
    with pytest.raises(ValueError):
        profile_submitted_outcome("admin")
