"""
Application layer: use case services and the error taxonomy.
"""
