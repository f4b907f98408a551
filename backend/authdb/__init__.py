"""
Auth database provisioner.

Bootstraps the MongoDB database behind the authentication service.
"""

__version__ = "0.1.0"
