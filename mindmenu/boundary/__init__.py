"""
Boundary layer for external system integrations.

Adapters for the relational database, the vector store and the Gemini
embedding/generation providers.
"""
