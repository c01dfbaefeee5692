"""Command-line interface for pathexcludes."""
