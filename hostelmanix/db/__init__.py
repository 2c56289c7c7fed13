"""Schema creation and seed data."""
