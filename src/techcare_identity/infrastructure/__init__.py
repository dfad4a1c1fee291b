"""Infrastructure adapters: persistence, email, file storage."""
