"""
Tests for the node executor registry.

Tests cover:
- Registering executors and rejecting bad registrations
- Dispatching a node dictionary by its "type"
- Running an import -> filter -> output chain through the default registry
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock

from PIL import Image

from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer
from IM_Libs.NodesLib.filter_node import create_filter_node
from IM_Libs.NodesLib.image_import_node import create_import_node
from IM_Libs.NodesLib.node_executors import (
    NodeExecutorRegistry,
    get_default_registry,
    register_default_executors,
)
from IM_Libs.NodesLib.output_node import create_output_node


class TestRegistration(unittest.TestCase):
    """Test executor registration."""

    def setUp(self):
        self.registry = NodeExecutorRegistry()

    def test_register_and_lookup(self):
        self.registry.register("  Filter ", Mock())

        self.assertTrue(self.registry.has_executor("Filter"))
        self.assertEqual(self.registry.node_types(), ["Filter"])

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            self.registry.register(" ", Mock())

    def test_non_callable_rejected(self):
        with self.assertRaises(ValueError):
            self.registry.register("Filter", "sepia")

    def test_duplicate_rejected(self):
        self.registry.register("Filter", Mock())

        with self.assertRaises(RuntimeError):
            self.registry.register("Filter", Mock())

    def test_builtin_node_types(self):
        register_default_executors(self.registry)

        self.assertEqual(self.registry.node_types(), ["Filter", "Image Import", "Output"])

    def test_default_registry_is_shared(self):
        self.assertIs(get_default_registry(), get_default_registry())


class TestDispatch(unittest.TestCase):
    """Test execute() and run_chain() dispatch."""

    def setUp(self):
        self.registry = NodeExecutorRegistry()

    def test_execute_uses_node_type(self):
        executor = Mock(return_value="done")
        self.registry.register("Filter", executor)
        node = {"id": "sepia", "type": "Filter", "filter_type": "sepia"}

        self.assertEqual(self.registry.execute(node, ["image"]), "done")
        executor.assert_called_once_with(node, ["image"])

    def test_unknown_type_raises_error(self):
        with self.assertRaises(KeyError):
            self.registry.execute({"id": "x", "type": "Emboss"}, [])

    def test_missing_type_raises_error(self):
        with self.assertRaises(KeyError):
            self.registry.execute({"id": "x"}, [])

    def test_run_chain_feeds_results_forward(self):
        self.registry.register("Source", Mock(return_value=1))
        self.registry.register("Step", lambda node, inputs: inputs[0] * 10)

        result = self.registry.run_chain([{"type": "Source"}, {"type": "Step"}, {"type": "Step"}])

        self.assertEqual(result, 100)

    def test_run_chain_first_node_gets_no_inputs(self):
        source = Mock(return_value="image")
        self.registry.register("Source", source)

        self.registry.run_chain([{"type": "Source"}])

        source.assert_called_once_with({"type": "Source"}, [])

    def test_empty_chain_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.run_chain([])


class TestDefaultChain(unittest.TestCase):
    """Test a full load -> filter -> save run through the default registry."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

        self.source = self.temp_path / "source.png"
        img = Image.new("RGB", (2, 1), (255, 0, 0))
        img.putpixel((1, 0), (255, 255, 255))
        img.save(self.source)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_grayscale_then_rotate_then_save(self):
        target = self.temp_path / "out" / "result.png"

        written = get_default_registry().run_chain([
            create_import_node("in", self.source),
            create_filter_node("gray", "grayscale"),
            create_filter_node("turn", "rotate"),
            create_output_node("out", target),
        ])

        self.assertEqual(written, target)
        result = ImageBuffer.load(target)
        self.assertEqual(result.size, (1, 2))
        self.assertEqual(result.get_pixel(0, 0).as_tuple(), (85, 85, 85))
        self.assertEqual(result.get_pixel(0, 1).as_tuple(), (255, 255, 255))

    def test_invalid_filter_in_chain_propagates(self):
        chain = [
            create_import_node("in", self.source),
            {"id": "bad", "type": "Filter", "filter_type": "emboss"},
        ]

        with self.assertRaises(ValueError):
            get_default_registry().run_chain(chain)
