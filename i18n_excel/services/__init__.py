"""Extraction, validation, projection and conversion services."""
