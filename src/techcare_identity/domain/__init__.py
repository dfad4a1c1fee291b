"""Domain layer for identity: principals and their repositories."""
