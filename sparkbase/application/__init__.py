"""
Application layer: adapters mapping application objects to documents.
"""
