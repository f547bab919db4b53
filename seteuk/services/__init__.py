"""
SeTeuk Master Services
======================

Business logic behind the API routes.

Services:
- request_builder: Build the Gemini payload from a form submission
- gemini_service: Call Gemini once and parse the structured reply
- file_reader: Read and base64-encode uploads concurrently
- result_renderer: Display model with character/byte counts
"""

# Services are imported directly when needed
# Example: from seteuk.services.gemini_service import generate_seteuk

__all__ = [
    'request_builder',
    'gemini_service',
    'file_reader',
    'result_renderer',
]
