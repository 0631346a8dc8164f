"""Core logic — scoring, rounding, record models, and the HTTP clients.

Nothing here configures logging or reads the command line; the CLI does that.
"""
