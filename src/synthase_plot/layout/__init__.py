"""Pure layout: scales, row polygons, annotation brackets and the legend."""

from .annotation_layout import AnnotationLayoutEngine, BracketSpec, OffsetStack
from .composer import LayoutComposer, LayoutSpec
from .scales import BandScale, LinearScale, OrdinalScale, Scales, derive_scales
from .tagging import TaggedDomain, tag_domains

__all__ = [
    "AnnotationLayoutEngine",
    "BracketSpec",
    "OffsetStack",
    "LayoutComposer",
    "LayoutSpec",
    "BandScale",
    "LinearScale",
    "OrdinalScale",
    "Scales",
    "derive_scales",
    "TaggedDomain",
    "tag_domains",
]
