"""Core domain models and shared utilities for Alloy."""
