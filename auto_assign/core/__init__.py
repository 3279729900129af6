"""Core assignment logic, context and logging for Auto Assign Issues."""
