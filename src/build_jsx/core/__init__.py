"""
Core Package.

Contains the lowering logic:
- ESTree node model and walker
- Annotation, name, props and children resolution
- Call assembly and runtime import injection
- Engine and trace logging
"""
