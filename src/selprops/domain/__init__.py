"""Selection property aggregation and commit planning (pure, engine-agnostic)."""
