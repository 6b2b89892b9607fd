"""Infrastructure layer — candidate-file sources backed by the filesystem.

Only the domain error types are imported from the domain layer.
It must never import from services, commands, or output.
"""
