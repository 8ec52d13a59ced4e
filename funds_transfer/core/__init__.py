"""
Core domain models, collaborator contracts and error taxonomy.

This module contains the foundational building blocks that are independent
of external systems (databases, clocks, transports).
"""
