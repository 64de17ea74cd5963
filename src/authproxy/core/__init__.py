"""Core configuration and security components."""
