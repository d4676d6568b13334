"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies following the Dependency Inversion Principle.

Modules:
    - media: Image hosting abstraction (Cloudinary, mock)
    - container: Service container wiring media host, offer store and offer services

This package enables:
    - Easy testing with mock implementations
    - Switching between providers without code changes
"""
