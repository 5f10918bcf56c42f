from .html_export import HTMLExporter

__all__ = ["HTMLExporter"]
