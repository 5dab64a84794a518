"""
Infrastructure layer: providers, configuration files, logging setup.
"""
