from nexus_unlocks.cards import rules  # noqa: F401
