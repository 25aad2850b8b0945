"""
Vastu report generation.

Turns a room scan into a two-stage Gemini pipeline: a core defect
assessment first, then a final report built on top of it.
"""
