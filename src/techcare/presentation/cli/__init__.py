"""Command-line utilities for TechCare."""
