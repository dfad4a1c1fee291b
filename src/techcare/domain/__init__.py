"""Domain layer shared by the TechCare packages."""
