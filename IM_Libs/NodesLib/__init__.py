"""
Image Manipulator Nodes Library.

Named executors that load, filter and save images.

Modules:
    node_executors: Registry mapping node type names to executors
    image_import_node: Load an image from disk
    filter_node: Run a named transformation
    output_node: Save an image to disk
"""

from IM_Libs.NodesLib.image_import_node import (
    ImageImportNode,
    execute_import_image_node,
    create_import_node,
    get_supported_image_formats,
    is_supported_format,
)
from IM_Libs.NodesLib.filter_node import (
    FilterNodeConfig,
    apply_filter,
    execute_filter_node,
    create_filter_node,
)
from IM_Libs.NodesLib.output_node import (
    OutputNodeConfig,
    execute_output_node,
    create_output_node,
)
from IM_Libs.NodesLib.node_executors import (
    NodeExecutorRegistry,
    get_default_registry,
    register_default_executors,
)

__all__ = [
    "ImageImportNode",
    "execute_import_image_node",
    "create_import_node",
    "get_supported_image_formats",
    "is_supported_format",
    "FilterNodeConfig",
    "apply_filter",
    "execute_filter_node",
    "create_filter_node",
    "OutputNodeConfig",
    "execute_output_node",
    "create_output_node",
    "NodeExecutorRegistry",
    "get_default_registry",
    "register_default_executors",
]
