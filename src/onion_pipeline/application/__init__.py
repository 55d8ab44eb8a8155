"""Application – use-case level building blocks."""
