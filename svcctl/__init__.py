"""svcctl - service lifecycle control (start, force restart, status)."""
