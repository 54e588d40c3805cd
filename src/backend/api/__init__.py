"""HTTP boundary for the notice engine."""
