"""Transcription and article generation orchestration for the newsdesk app."""
