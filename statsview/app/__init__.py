"""Application wiring for view-all screens: dependency config, factories, CLI."""
