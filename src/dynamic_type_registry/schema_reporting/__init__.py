"""Schema reporting exports."""

from .descriptions import describe_object, describe_type, render_description

__all__ = ["describe_object", "describe_type", "render_description"]
