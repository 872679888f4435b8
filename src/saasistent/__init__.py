"""
SaaSistent - SaaS project configuration wizard.

Walks a user through an eight-step project wizard and turns the finished
configuration into an init prompt, an MVP scope and a MAX scope via an LLM.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("saasistent")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]
