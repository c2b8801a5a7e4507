from .array_export import save_array

__all__ = ["save_array"]
