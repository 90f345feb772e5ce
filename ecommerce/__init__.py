"""Cart management backend: models, repositories, cart service and HTTP routers."""

__version__ = "1.0.0"
