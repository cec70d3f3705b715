"""duedate - Pregnancy due date calculator."""
