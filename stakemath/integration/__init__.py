"""
Adapters between external data (JSON, contract interface descriptors) and the core.
"""
