"""Form-driven client for the meal planner API."""
