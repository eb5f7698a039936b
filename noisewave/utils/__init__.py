"""Shared helpers: field validation and drawing surfaces."""
