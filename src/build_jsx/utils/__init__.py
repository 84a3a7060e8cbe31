"""
Utilities Package.

Shared helpers that are not specific to JSX lowering (console and logging).
"""
