"""Output layer — turn ServiceResult into terminal text or JSON."""
