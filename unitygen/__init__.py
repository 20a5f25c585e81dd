"""Model swagger definitions and properties and render them as C# code for Unity3D."""

__version__ = "0.1.0"
__all__ = ["convention", "errors", "model", "objects", "properties"]