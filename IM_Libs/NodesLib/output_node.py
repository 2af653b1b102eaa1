"""
Output Node for Image Manipulator.

Saves an ImageBuffer to disk. The file format is inferred from the output
path's extension.

Classes:
    OutputNodeConfig: Configuration for output node

Functions:
    execute_output_node: Executor for output nodes
    create_output_node: Helper to create output node dictionary
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from IM_Libs.constants import NODE_TYPE_OUTPUT
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer
from IM_Libs.ImageEditingLib.image_manipulator import save_image


@dataclass
class OutputNodeConfig:
    """Configuration for output node execution.

    Attributes:
        output_path: Destination file; its extension selects the format
        create_directories: Create missing parent directories (default: True)
        overwrite: Replace an existing file (default: True)
    """
    output_path: str = "output.png"
    create_directories: bool = True
    overwrite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputNodeConfig":
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def resolve_path(self) -> Path:
        """
        Resolve and prepare the destination path.

        Raises:
            FileExistsError: If the file exists and overwrite is False
            FileNotFoundError: If the parent directory is missing and
                create_directories is False
        """
        path = Path(self.output_path)

        if path.exists() and not self.overwrite:
            raise FileExistsError(f"Output file already exists: {path}")

        parent = path.parent
        if not parent.exists():
            if not self.create_directories:
                raise FileNotFoundError(f"Output directory does not exist: {parent}")
            parent.mkdir(parents=True, exist_ok=True)

        return path


def execute_output_node(node: Dict[str, Any], inputs: List[Any]) -> Path:
    """
    Executor for output nodes.

    Args:
        node: Node dictionary with 'output_path' (required) and optional
            'create_directories' / 'overwrite'
        inputs: [0] is the ImageBuffer to save

    Returns:
        Path of the written file

    Raises:
        KeyError: If 'output_path' is missing
        ValueError: If there is no input
        TypeError: If the input is not an ImageBuffer
        IOError: If the file cannot be written
    """
    if not node.get("output_path"):
        raise KeyError("Output node missing required 'output_path' field")

    if not inputs:
        raise ValueError("Output node requires an image input")

    image = inputs[0]
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"Expected ImageBuffer, got {type(image)}")

    config = OutputNodeConfig.from_dict(node)
    return save_image(image, config.resolve_path())


def create_output_node(
    node_id: str,
    output_path: Union[str, Path],
    create_directories: bool = True,
    overwrite: bool = True,
) -> Dict[str, Any]:
    """Helper to create an output node dictionary."""
    return {
        "id": node_id,
        "type": NODE_TYPE_OUTPUT,
        "output_path": str(output_path),
        "create_directories": create_directories,
        "overwrite": overwrite,
    }
