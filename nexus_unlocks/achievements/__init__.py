from nexus_unlocks.achievements.rules import mystery, onboarding, tiers  # noqa: F401
