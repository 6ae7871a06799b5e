"""Resumable ingestion of ScrollMapper Bible JSON into a Supabase vector table."""
