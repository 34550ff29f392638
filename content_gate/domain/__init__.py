"""Shared domain types for the workflow-gating core."""
