"""Service layer — wraps library operations into ServiceResult for the CLI."""
