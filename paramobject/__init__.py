"""paramobject - parameter object class generator for the Introduce Parameter Object refactoring."""

__version__ = "0.1.0"
