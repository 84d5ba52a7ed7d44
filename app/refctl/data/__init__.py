"""Bundled data files for refctl."""
