"""Shared helpers: responses, coercion, tokens, uploads, dates."""
