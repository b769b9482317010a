"""Shared utilities: the remote API client and the polyline decoder."""
