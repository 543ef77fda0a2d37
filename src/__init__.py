"""
Stipple - a raster image editor.

This package contains the main application modules:
- core: Tool registry, tool manager, workspace and application wiring
- editor: Canvas and builtin tools
- ui: Main window, toolbox and tool toolbar
- services: Application services (config, logging)
"""

__version__ = "0.1.0"
