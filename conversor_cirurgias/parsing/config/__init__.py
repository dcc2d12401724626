from .layout import ExportLayout, DEFAULT_LAYOUT, load_layout

__all__ = ['ExportLayout', 'DEFAULT_LAYOUT', 'load_layout']
