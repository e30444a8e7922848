"""Core settings, models, and interfaces for the transaction counter."""
