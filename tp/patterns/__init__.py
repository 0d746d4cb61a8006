"""Pattern renderers."""

from tp.patterns import square, triangle

__all__ = ["square", "triangle"]
