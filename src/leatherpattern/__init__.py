"""Leatherpattern - Geometry engine for leather pattern design.

Leatherpattern turns a small set of editable bezier nodes and transforms into
exact outlines, stitch margins and stitch-hole placements for leather
patterns. Outlines can be symmetric (a right half mirrored about the fold
line) or asymmetric (a full perimeter), and can be extended by unioning
auxiliary shapes into the base outline.

Example:
    $ leatherpattern report holster.json

This prints the outline dimensions and the stitch count of every stitch line
defined in holster.json.
"""

__version__ = "0.1.0"
__author__ = "Leatherpattern Contributors"

__all__ = ["__author__", "__version__"]
