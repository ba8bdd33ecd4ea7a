"""Markup layer — fragment composition, sanitization, views and templates."""
