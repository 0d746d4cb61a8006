"""Text patterns - concentric squares and single-loop triangles."""
