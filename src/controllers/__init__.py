from .preview_controller import PreviewController
from .color_picker_controller import ColorPickerController

__all__ = [
    'PreviewController',
    'ColorPickerController',
]
