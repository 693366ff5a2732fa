"""Interactive diagrams of matrix arithmetic."""
