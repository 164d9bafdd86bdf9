"""Core logic for the JSON Table Converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON text
- flatten nested values into dot/index keyed records
- build and pivot tables
- serialize tables to CSV, Markdown or tab-delimited text
"""
