"""Data layer - schemas for habit logs and fingerprints."""
