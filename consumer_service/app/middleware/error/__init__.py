from .error_handler import ConsumerServiceErrorHandler, setup_consumer_error_handling

__all__ = ["ConsumerServiceErrorHandler", "setup_consumer_error_handling"]
