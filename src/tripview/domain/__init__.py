"""Domain layer — value categories and instant handling.

This layer depends only on the stdlib and :mod:`tripview.errors`.
It must never import from markup, display, services, commands, or config.
"""
