"""Core configuration, security and wiring helpers."""
