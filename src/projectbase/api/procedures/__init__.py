"""Typed procedures for the dashboard, served under /api/trpc/<namespace>.<name>."""
