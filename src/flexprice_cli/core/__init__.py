"""
Core configuration and exception modules for flexprice-cli.
"""
