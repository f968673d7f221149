"""Vocabulary tracking service: words, AI-generated meanings and example sentences."""
