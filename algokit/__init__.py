"""Classic algorithms and data structures: range queries, strings, trees and disjoint sets."""

__version__ = "0.1.0"