"""content
Text, commands and dict views around the core engine.
"""
