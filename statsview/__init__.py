"""View-all statistics screen wiring: route table, use-case resolution, and VM assembly."""
