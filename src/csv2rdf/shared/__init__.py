"""Shared data models for the CSV to RDF converter."""
