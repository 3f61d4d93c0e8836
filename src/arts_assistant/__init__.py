"""Personal task-tracking assistant driven by short text commands."""
