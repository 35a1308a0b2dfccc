"""Inbound adapters."""
