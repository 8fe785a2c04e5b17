"""HTTP API for the grammar checker.

WHY: Browser front ends cannot hold the correction model's API key, so
correction and diffing are served from a small FastAPI app.

HOW: app.py defines the routes, models.py the pydantic schemas. The app
is stateless; every request is handled independently.

RULES:
- All correction calls go through grammar_checker.api.GeminiClient
- The server never stores submitted text
"""
