"""
Notekeeper Backend - Personal Note-Taking Service

REST backend for personal notes with color tags, categories, attachments
and per-note sharing with view/edit permissions.

Version: 1.0.0
"""

__version__ = "1.0.0"
