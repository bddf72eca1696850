"""HTTP surface for shopping lists, unit conversion and preferences."""
