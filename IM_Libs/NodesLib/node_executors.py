"""
Node executors for Image Manipulator.

A node is a dictionary whose "type" names one of the built-in steps
(Image Import, Filter, Output). The registry looks the type up and calls the
matching executor, so a load -> filter -> save run can be described as data:

    >>> registry = get_default_registry()
    >>> registry.run_chain([
    ...     create_import_node("in", "photo.png"),
    ...     create_filter_node("sepia", "sepia"),
    ...     create_filter_node("turn", "rotate"),
    ...     create_output_node("out", "photo_sepia.jpg"),
    ... ])
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from IM_Libs.constants import NODE_TYPE_FILTER, NODE_TYPE_IMAGE_IMPORT, NODE_TYPE_OUTPUT

logger = logging.getLogger(__name__)

# Executor signature: (node_dict, inputs) -> result
ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


class NodeExecutorRegistry:
    """Maps node type names to executors."""

    def __init__(self):
        self._executors: Dict[str, ExecutorFunction] = {}

    def register(self, node_type: str, executor: ExecutorFunction) -> None:
        """
        Register the executor for a node type.

        Raises:
            ValueError: If node_type is empty or executor is not callable
            RuntimeError: If node_type is already registered
        """
        node_type = str(node_type).strip()
        if not node_type:
            raise ValueError("node_type cannot be empty")
        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")
        if node_type in self._executors:
            raise RuntimeError(f"Node type '{node_type}' is already registered")

        self._executors[node_type] = executor
        logger.debug(f"Registered executor for node type: {node_type}")

    def has_executor(self, node_type: str) -> bool:
        return str(node_type).strip() in self._executors

    def node_types(self) -> List[str]:
        return sorted(self._executors)

    def execute(self, node: Dict[str, Any], inputs: List[Any]) -> Any:
        """
        Run a single node.

        Args:
            node: Node dictionary; node["type"] selects the executor
            inputs: Results of upstream nodes (an ImageBuffer for Filter
                and Output nodes, empty for Image Import)

        Raises:
            KeyError: If the node has no type or the type is unknown
        """
        node_type = str(node.get("type", "")).strip()
        if node_type not in self._executors:
            raise KeyError(
                f"No executor registered for node type '{node_type}'. "
                f"Available types: {', '.join(self.node_types())}"
            )

        logger.debug(f"Executing {node_type} node {node.get('id', 'unknown')}")
        return self._executors[node_type](node, inputs)

    def run_chain(self, nodes: Sequence[Dict[str, Any]]) -> Any:
        """
        Run nodes in order, feeding each result into the next node.

        The first node receives no inputs. Because filters return the buffer
        they were given (a new one for rotate), every step sees the image as
        left by the step before it.

        Returns:
            The last node's result, e.g. the written Path for an Output node

        Raises:
            ValueError: If nodes is empty
        """
        if not nodes:
            raise ValueError("Cannot run an empty node chain")

        result = self.execute(nodes[0], [])
        for node in nodes[1:]:
            result = self.execute(node, [result])
        return result


_default_registry: Optional[NodeExecutorRegistry] = None


def get_default_registry() -> NodeExecutorRegistry:
    """Get the shared registry holding the built-in executors, creating it on first call."""
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: NodeExecutorRegistry) -> None:
    """Register the Image Import, Filter and Output executors."""
    from IM_Libs.NodesLib.image_import_node import execute_import_image_node
    from IM_Libs.NodesLib.filter_node import execute_filter_node
    from IM_Libs.NodesLib.output_node import execute_output_node

    registry.register(NODE_TYPE_IMAGE_IMPORT, execute_import_image_node)
    registry.register(NODE_TYPE_FILTER, execute_filter_node)
    registry.register(NODE_TYPE_OUTPUT, execute_output_node)

    logger.info("Registered default node executors")
