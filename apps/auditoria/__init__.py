"""Audit trail and regulatory configuration."""
