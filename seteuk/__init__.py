"""
SeTeuk Master Backend Package
=============================

Flask-based backend for the SeTeuk Master school-record drafting assistant.

Structure:
- routes/: API route blueprints
- services/: Request building, Gemini calls, file reading, rendering
- static/: Single-page form
- config.py: Configuration management
- prompt_config.py: Fixed system instruction, prompt template and schema
"""

from .config import config, Config

__version__ = "1.0.0"

__all__ = ['config', 'Config']
