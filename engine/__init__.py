"""engine
Turn pipeline, config, run logs and front-end loops.
"""
