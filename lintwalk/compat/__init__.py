"""File-enumerator fallback for hosts without an ignore-oracle session."""
