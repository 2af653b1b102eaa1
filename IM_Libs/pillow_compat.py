"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
so the rest of the package reaches it through a single module.

This module loads the Pillow-provided modules via importlib and re-exports
`Image` and `ImageClass` (the `PIL.Image.Image` type, for isinstance checks).
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")

if _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

# PIL.Image.Image, used when bridging to and from Pillow images
ImageClass = getattr(_pil_image, "Image")
