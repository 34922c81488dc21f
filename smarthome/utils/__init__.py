"""Stateless helper calculations."""
