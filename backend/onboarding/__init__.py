"""Onboarding core: session guard, role registrar, profile drafts and navigation."""
