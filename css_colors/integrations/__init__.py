"""
Optional adapters to third-party libraries.

``numpy`` is a core dependency and always available; the Pillow and pydantic
adapters import their library lazily and need the matching extra installed.
"""
