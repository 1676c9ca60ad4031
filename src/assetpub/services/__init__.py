"""Service layer — operations returning ServiceResult.

Services may import from publishing, managers and config.
They must never import from commands or output.
"""
