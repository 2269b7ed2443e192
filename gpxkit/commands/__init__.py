"""CLI command implementations for gpxkit."""
