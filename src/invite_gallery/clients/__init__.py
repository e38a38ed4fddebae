"""Clients for external resources."""
