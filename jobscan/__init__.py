"""LLM-backed job scanner: search criteria in, job listings and insights out."""
