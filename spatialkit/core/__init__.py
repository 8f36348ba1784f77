"""Implementation modules of spatialkit; import from ``spatialkit`` instead."""
