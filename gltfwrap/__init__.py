"""Read-only views over parsed glTF 2.0 documents, with transform math."""

__version__ = "0.1.0"
__all__ = ["casting", "math", "mesh", "scene", "skin", "texture"]