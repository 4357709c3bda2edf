"""Recurring-message task definitions for the pepper chat bot."""
