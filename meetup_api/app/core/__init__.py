"""
Cross-cutting building blocks: settings, logging, persistence wiring,
error taxonomy and caller identification.
"""
