"""Auto Assign Issues: assign team members to GitHub issues based on labels."""

__version__ = "0.1.0"
