"""Command-line entry point and terminal front end."""
