from .loader import DEFAULT_SETTINGS, load_settings

__all__ = ['DEFAULT_SETTINGS', 'load_settings']
