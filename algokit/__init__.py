"""Classic algorithm exercises on integers, strings, arrays, linked lists, trees and matrices."""

__version__ = "0.1.0"

__all__ = ["arrays", "integers", "linked_list", "matrices", "strings", "trees"]