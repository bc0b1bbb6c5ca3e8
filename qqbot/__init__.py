"""Async clients for the CQHTTP (OneBot v11) bot API."""
