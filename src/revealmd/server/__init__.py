"""Local HTTP serving for a presentation.

router   — per-request routing between shell, assets and source files
listener — binds the port and serves it on a background thread
browser  — opens the presentation URL with the platform's launcher
"""
