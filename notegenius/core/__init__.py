"""External collaborators of the note core: LLM providers and their factory."""
