"""Duck Shoot games package."""
