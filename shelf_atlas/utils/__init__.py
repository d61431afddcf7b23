"""Utility modules for Shelf Atlas.

This package contains:
- packers: The shelf packer and the atlas fitting helpers built on it
- previews: Rendering of packer state to images
- type_hints: Shared type aliases
"""
