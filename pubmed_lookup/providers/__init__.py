"""Upstream metadata providers."""
