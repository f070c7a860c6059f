"""Engine services: knowledge graph and learning."""
