"""Adapters connecting the album domain to infrastructure."""
