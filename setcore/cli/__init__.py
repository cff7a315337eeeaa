"""Command-line inspection tools for the setcore engine."""
