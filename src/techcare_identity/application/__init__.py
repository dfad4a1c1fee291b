"""Application layer: sign-up commands, services and the auth context."""
