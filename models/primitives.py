"""
Shared primitive data types for the game.

This module provides the basic geometric types used throughout the
codebase: positions, viewport dimensions and bounding boxes.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and offsets.

    Coordinates can be positive, negative, or zero; the dog, for
    instance, starts off-screen at a negative x.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> offscreen = Point2D(x=-120.0, y=400.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Viewport or display resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> viewport = Resolution(width=1280, height=720)
        >>> viewport.center_x
        640.0
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    @property
    def center_x(self) -> float:
        """Horizontal center of the viewport."""
        return self.width / 2

    def contains(self, point: Point2D) -> bool:
        """Check if a point lies in the half-open area [0, width) x [0, height)."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for hit boxes. Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Args:
            point: The point to check

        Returns:
            True if point is inside or on the boundary of the rectangle
        """
        return (self.x <= point.x <= self.right and
                self.y <= point.y <= self.bottom)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
