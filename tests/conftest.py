"""Shared fixtures for inheritzoom tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from inheritzoom.model import MethodSignature, TypeDeclaration, TypeKind

SHAPES = {
    "Shape.java": """
package demo;

/** Anything that can be drawn. */
public interface Shape extends Drawable, Comparable<Shape> {
    /**
     * Area in square units.
     */
    double area();
}
""",
    "Drawable.java": """
package demo;

public interface Drawable {
    void draw(Canvas canvas);
}
""",
    "AbstractShape.java": """
package demo;

public abstract class AbstractShape implements Shape {
    protected String name = "shape { with braces }";

    public AbstractShape(String name) {
        this.name = name;
    }

    public int compareTo(Shape other) {
        return Double.compare(area(), other.area());
    }
}
""",
    "Circle.java": """
package demo;

// class Fake extends Nothing {}
public final class Circle extends AbstractShape {
    private final double radius;

    public Circle(double radius) {
        super("circle");
        this.radius = radius;
    }

    /** Area of the circle. */
    @Override
    public double area() {
        return Math.PI * radius * radius;
    }

    @Override
    public void draw(Canvas canvas) {
        canvas.circle(radius);
    }
}
""",
}


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def shapes_project(tmp_path: Path) -> Path:
    """A small Java project with classes, interfaces and an abstract class."""
    src = tmp_path / "src" / "main" / "java" / "demo"
    src.mkdir(parents=True)
    for filename, content in SHAPES.items():
        (src / filename).write_text(content, encoding="utf-8")
    return tmp_path


def make_decl(
    name: str,
    kind: str = TypeKind.CLASS,
    superclass: str | None = None,
    interfaces: list[str] | None = None,
    methods: list[str] | None = None,
    source_file: str | None = None,
) -> TypeDeclaration:
    return TypeDeclaration(
        name=name,
        kind=kind,
        superclass=superclass,
        interface_refs=list(interfaces or []),
        methods=[MethodSignature(m, "") for m in methods or []],
        source_file=source_file,
    )


@pytest.fixture
def decl():
    """Factory for TypeDeclaration instances."""
    return make_decl
