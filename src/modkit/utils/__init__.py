from .paths import get_data_directory

__all__ = ["get_data_directory"]
