"""TechCare accounts backend."""
