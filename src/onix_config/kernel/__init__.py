from .handler_registry import HandlerFactory, HandlerRegistry, UnknownHandlerError

__all__ = ["HandlerFactory", "HandlerRegistry", "UnknownHandlerError"]
