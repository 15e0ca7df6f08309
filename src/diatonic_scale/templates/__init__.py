"""
Scale template definitions on disk.
"""

from diatonic_scale.templates.loader import TemplateLoader

__all__ = ["TemplateLoader"]
