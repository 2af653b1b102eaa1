"""
Image Import Node for Image Manipulator.

Loads an image file from disk into an ImageBuffer for downstream filters.

Classes:
    ImageImportNode: Data model for an image import node

Functions:
    execute_import_image_node: Executor for image import nodes
    create_import_node: Helper to create an import node dictionary
    get_supported_image_formats: List the supported file extensions
    is_supported_format: Check a path's extension
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from IM_Libs.constants import NODE_TYPE_IMAGE_IMPORT, SUPPORTED_STANDARD_IMAGES
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported image formats.

    Returns:
        Sorted list of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


@dataclass
class ImageImportNode:
    """Data model for an image import node.

    Attributes:
        node_id: Unique identifier for this node
        file_path: Path to the image file to import
    """

    node_id: str
    file_path: Path

    def __post_init__(self):
        self.file_path = Path(self.file_path)

        if not self.file_path.exists():
            raise FileNotFoundError(f"Image file not found: {self.file_path}")

        if not self.file_path.is_file():
            raise ValueError(f"Path is not a file: {self.file_path}")

    def load_image(self) -> ImageBuffer:
        """
        Decode the image from disk.

        Every call returns a freshly decoded buffer, since the filters mutate
        the buffer they receive.

        Raises:
            IOError: If the image cannot be decoded
        """
        return ImageBuffer.load(self.file_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_id": self.node_id,
            "file_path": str(self.file_path),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageImportNode":
        return cls(
            node_id=data.get("node_id", ""),
            file_path=Path(data.get("file_path", "")),
        )


def execute_import_image_node(node: Dict[str, Any], inputs: List[Any]) -> ImageBuffer:
    """
    Executor for image import nodes.

    Args:
        node: Node dictionary containing:
            - 'file_path': Path to image file (required)
        inputs: Unused; import nodes have no inputs

    Returns:
        The decoded ImageBuffer

    Raises:
        KeyError: If 'file_path' is missing
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be decoded
    """
    file_path = node.get("file_path")
    if not file_path:
        raise KeyError("Image import node missing required 'file_path' field")

    import_node = ImageImportNode(
        node_id=node.get("id", node.get("node_id", "unknown")),
        file_path=Path(file_path),
    )

    return import_node.load_image()


def create_import_node(node_id: str, file_path: Union[str, Path]) -> Dict[str, Any]:
    """Helper to create an image import node dictionary."""
    return {
        "id": node_id,
        "type": NODE_TYPE_IMAGE_IMPORT,
        "file_path": str(file_path),
    }
