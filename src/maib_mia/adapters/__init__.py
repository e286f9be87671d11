"""Adapters – transport integrations."""
