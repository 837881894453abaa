"""SurfaceLoops - Trace closed loops on the fundamental polygon of a surface.

A genus-g orientable surface is presented as a polygon with 4g sides glued
pairwise. SurfaceLoops keeps track of loops drawn on that polygon: a path
reaching a side carries on from the paired side, and loops are validated
before being committed. All geometry is exact rational arithmetic.

Example:
    $ surfaceloops trace --genus 1 in:1/2,1/2 side:0@1/3 in:1/4,1/4 close
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
