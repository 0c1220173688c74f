"""Output schemas for svcctl commands, registered by (domain, command)."""
