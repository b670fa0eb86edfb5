"""Generate Postman collections from the routes and structs of Go HTTP services."""

__version__ = "0.1.0"
__all__ = ["__version__"]