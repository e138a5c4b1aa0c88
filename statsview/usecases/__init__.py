"""Use-case layer for resolving which statistics use case backs a screen.

Modules here coordinate domain routes and injected providers without building
view models or touching presentation state.
"""
