from .logger import get_logger, new_request_id, setup_logging

__all__ = ["get_logger", "new_request_id", "setup_logging"]
