"""Client entry flow: resolution, reporting and window handoff."""
