"""Binary trees with parent links: building, walking, measuring, finding relatives and drawing."""

__version__ = "0.1.0"
__all__ = ["node", "printer", "traversal", "metrics", "relatives"]