"""Domain layer - display settings, render output types and collaborator protocols.

This layer contains:
- types: Display-mode enums, spans and render results
- protocols: Interfaces for locale data, date formatting and caching
- config: The immutable DisplayConfig model

The domain layer has no dependencies on the application or infrastructure layers.
"""
