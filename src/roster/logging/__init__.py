from .logging import get_logger, reset_logger, log_file_path

__all__ = ["get_logger", "reset_logger", "log_file_path"]
