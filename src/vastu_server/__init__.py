"""Vastu scan relay: report generation and chat over the Gemini API."""
