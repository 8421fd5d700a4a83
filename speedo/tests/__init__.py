"""Unit tests for the speedometer configuration loader."""
