"""
Command ingestion module.

Turns raw text typed at the prompt into structured exchange commands.
"""
