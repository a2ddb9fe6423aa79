"""Labeled console logging and the skipped-row log."""
