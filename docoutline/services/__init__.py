"""Collaborators around the outline engine: PDF text extraction and batch runs."""
