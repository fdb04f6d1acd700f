"""Outbound and inbound adapters."""
