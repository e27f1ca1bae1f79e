"""
Rendering performance checks.

Builds wide and deep trees and measures how long serialization takes.
"""

import time

from jsir import (
    Module, BlockStatement, EmptyStatement, BooleanLiteral,
    VariableStatement, VariableDeclarator, ConditionalStatement,
)


def measure_serialize_time(module: Module, iterations: int = 5) -> float:
    """
    Measure average serialization time.

    Returns:
        Average time in milliseconds
    """
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        module.serialize()
        end = time.perf_counter()
        times.append((end - start) * 1000)
    return sum(times) / len(times)


def build_wide(count: int) -> Module:
    module = Module()
    for i in range(count):
        VariableStatement([VariableDeclarator(f"v{i}", BooleanLiteral(i % 2 == 0))], module)
    return module


def build_deep(depth: int) -> Module:
    node = EmptyStatement()
    for _ in range(depth):
        node = ConditionalStatement(BooleanLiteral(True), BlockStatement([node]))
    return Module(False, [node])


class TestRenderPerformance:
    """Timing checks for large trees."""

    def test_wide_module(self):
        """Test that a module with many statements renders quickly."""
        module = build_wide(5000)
        avg_ms = measure_serialize_time(module)
        print(f"\nwide (5000 statements): {avg_ms:.2f}ms")
        assert avg_ms < 2000

    def test_deep_nesting(self):
        """Test that deep nesting renders with four spaces per level."""
        depth = 50
        module = build_deep(depth)
        avg_ms = measure_serialize_time(module)
        print(f"\ndeep ({depth} levels): {avg_ms:.2f}ms")
        lines = module.serialize().split("\n")
        assert lines[depth] == " " * (4 * depth) + ";"
        assert avg_ms < 2000

    def test_repeatable(self):
        """Test that large trees serialize identically every time."""
        module = build_wide(500)
        assert module.serialize() == module.serialize()
