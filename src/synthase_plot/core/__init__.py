"""Dataset model, validation and colour sampling."""

from .dataset import AnnotationEntry, Dataset, Domain, Row
from .color_scale import ColorScale

__all__ = ["AnnotationEntry", "Dataset", "Domain", "Row", "ColorScale"]
