"""User-facing entry points: the HTTP API and the command line."""
