"""Command-line interface for avarpc.

Entry point: ``avarpc.cli.main:main`` (also reachable via ``python -m avarpc``).
"""
