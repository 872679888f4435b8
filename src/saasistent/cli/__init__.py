"""SaaSistent command-line interface."""
