"""
Filter Node for Image Manipulator.

Wraps the transformation engine so a filter can be selected by name and
configured from a node dictionary.

Example:
    >>> from IM_Libs.NodesLib.filter_node import create_filter_node
    >>> from IM_Libs.NodesLib.node_executors import get_default_registry
    >>>
    >>> node = create_filter_node("hue-1", "hue", hue=120)
    >>> registry = get_default_registry()
    >>> result = registry.execute(node, [buffer])
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from IM_Libs.constants import (
    FILTER_HUE,
    FILTER_INSTAGRAM,
    FILTER_LIGHTNESS,
    FILTER_SATURATION,
    NODE_TYPE_FILTER,
)
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer
from IM_Libs.ImageEditingLib.image_manipulator import TRANSFORMATIONS, load_image

# Filter name -> node field holding its numeric parameter
PARAMETER_FIELDS = {
    FILTER_HUE: "hue",
    FILTER_SATURATION: "saturation",
    FILTER_LIGHTNESS: "lightness",
}


@dataclass
class FilterNodeConfig:
    """Configuration for filter node execution.

    Attributes:
        filter_type: One of 'grayscale', 'invert', 'sepia', 'bw', 'rotate',
            'instagram', 'hue', 'saturation', 'lightness'
        hue: Hue in degrees (0-360), used by 'hue'
        saturation: Saturation (0-1), used by 'saturation'
        lightness: Lightness (0-1), used by 'lightness'
        halo_path: Halo overlay for 'instagram' (default resources/halo.png)
        grain_path: Grain overlay for 'instagram'
            (default resources/decorative_grain.png)
    """
    filter_type: str = "grayscale"
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None
    halo_path: Optional[str] = None
    grain_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterNodeConfig":
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)

    def validate(self) -> None:
        """
        Check that the filter exists and has its parameter.

        Raises:
            ValueError: If filter_type is unknown or its parameter is missing
        """
        if self.filter_type not in TRANSFORMATIONS:
            available = ", ".join(sorted(TRANSFORMATIONS))
            raise ValueError(
                f"Unknown filter_type '{self.filter_type}'. Available filters: {available}"
            )

        field_name = PARAMETER_FIELDS.get(self.filter_type)
        if field_name is not None and getattr(self, field_name) is None:
            raise ValueError(f"Filter '{self.filter_type}' requires '{field_name}'")


def apply_filter(image: ImageBuffer, config: FilterNodeConfig) -> ImageBuffer:
    """
    Run the transformation selected by config on image.

    Returns:
        Whatever the transformation returns: the same buffer, or a new one
        for 'rotate'
    """
    config.validate()
    transform = TRANSFORMATIONS[config.filter_type]

    field_name = PARAMETER_FIELDS.get(config.filter_type)
    if field_name is not None:
        return transform(image, getattr(config, field_name))

    if config.filter_type == FILTER_INSTAGRAM:
        halo = load_image(Path(config.halo_path)) if config.halo_path else None
        grain = load_image(Path(config.grain_path)) if config.grain_path else None
        return transform(image, halo=halo, grain=grain)

    return transform(image)


def execute_filter_node(node: Dict[str, Any], inputs: List[Any]) -> ImageBuffer:
    """
    Executor for filter nodes.

    Node dict should contain:
        - 'filter_type': Name of the transformation
        - 'hue' / 'saturation' / 'lightness' for the HSL filters
        - optional 'halo_path' / 'grain_path' for 'instagram'

    Inputs:
        - [0]: ImageBuffer to transform

    Returns:
        Transformed ImageBuffer

    Raises:
        ValueError: If there is no input or the filter is invalid
        TypeError: If the input is not an ImageBuffer
    """
    if not inputs:
        raise ValueError("Filter node requires an image input")

    image = inputs[0]
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"Expected ImageBuffer, got {type(image)}")

    config = FilterNodeConfig.from_dict(node)
    return apply_filter(image, config)


def create_filter_node(
    node_id: str,
    filter_type: str,
    hue: Optional[float] = None,
    saturation: Optional[float] = None,
    lightness: Optional[float] = None,
    halo_path: Optional[str] = None,
    grain_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Helper to create a filter node dictionary.

    Raises:
        ValueError: If the filter is invalid
    """
    config = FilterNodeConfig(
        filter_type=filter_type,
        hue=hue,
        saturation=saturation,
        lightness=lightness,
        halo_path=halo_path,
        grain_path=grain_path,
    )
    config.validate()

    node = {"id": node_id, "type": NODE_TYPE_FILTER}
    node.update(config.to_dict())
    return node
